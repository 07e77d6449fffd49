"""Request and response bodies for Microsoft.Capacity reservations and quotas"""

from __future__ import annotations

import datetime
import enum
from typing import Any, Dict, List, Optional

from pydantic import Field

from azmgmt.core.models import (
    AzureModel,
    OpenEnum,
    ProxyResource,
    SystemData,
    flattened,
)


# enumerations


class AppliedScopeType(str, enum.Enum):
    SINGLE = "Single"
    SHARED = "Shared"
    MANAGEMENT_GROUP = "ManagementGroup"


class BenefitTerm(str, enum.Enum):
    P1Y = "P1Y"
    P3Y = "P3Y"


class BillingPlan(str, enum.Enum):
    P1M = "P1M"


class CommitmentGrain(str, enum.Enum):
    HOURLY = "Hourly"


class DisplayProvisioningState(str, enum.Enum):
    SUCCEEDED = "Succeeded"
    EXPIRING = "Expiring"
    EXPIRED = "Expired"
    PENDING = "Pending"
    PROCESSING = "Processing"
    CANCELLED = "Cancelled"
    FAILED = "Failed"
    WARNING = "Warning"
    NO_BENEFIT = "NoBenefit"


class ErrorResponseCode(str, enum.Enum):
    NOT_SPECIFIED = "NotSpecified"
    INTERNAL_SERVER_ERROR = "InternalServerError"
    SERVER_TIMEOUT = "ServerTimeout"
    AUTHORIZATION_FAILED = "AuthorizationFailed"
    BAD_REQUEST = "BadRequest"
    INVALID_REQUEST_CONTENT = "InvalidRequestContent"
    OPERATION_FAILED = "OperationFailed"
    INVALID_RESERVATION_ORDER_ID = "InvalidReservationOrderId"
    INVALID_RESERVATION_ID = "InvalidReservationId"
    RESERVATION_ORDER_NOT_FOUND = "ReservationOrderNotFound"
    INVALID_SUBSCRIPTION_ID = "InvalidSubscriptionId"
    FORBIDDEN = "Forbidden"
    PATCH_VALUES_SAME_AS_EXISTING = "PatchValuesSameAsExisting"
    RESERVATION_ORDER_CREATION_FAILED = "ReservationOrderCreationFailed"
    PURCHASE_ERROR = "PurchaseError"
    BILLING_ERROR = "BillingError"
    CALCULATE_PRICE_FAILED = "CalculatePriceFailed"
    APPLIED_SCOPES_SAME_AS_EXISTING = "AppliedScopesSameAsExisting"
    SELF_SERVICE_REFUND_NOT_SUPPORTED = "SelfServiceRefundNotSupported"
    REFUND_LIMIT_EXCEEDED = "RefundLimitExceeded"


class InstanceFlexibility(str, enum.Enum):
    ON = "On"
    OFF = "Off"


class OperationStatus(str, enum.Enum):
    SUCCEEDED = "Succeeded"
    FAILED = "Failed"
    CANCELLED = "Cancelled"
    PENDING = "Pending"


class ExchangeStatus(str, enum.Enum):
    SUCCEEDED = "Succeeded"
    FAILED = "Failed"
    CANCELLED = "Cancelled"
    PENDING_REFUNDS = "PendingRefunds"
    PENDING_PURCHASES = "PendingPurchases"


class PaymentStatus(str, enum.Enum):
    SUCCEEDED = "Succeeded"
    FAILED = "Failed"
    SCHEDULED = "Scheduled"
    CANCELLED = "Cancelled"


class ProvisioningState(str, enum.Enum):
    CREATING = "Creating"
    PENDING_RESOURCE_HOLD = "PendingResourceHold"
    CONFIRMED_RESOURCE_HOLD = "ConfirmedResourceHold"
    PENDING_BILLING = "PendingBilling"
    CONFIRMED_BILLING = "ConfirmedBilling"
    CREATED = "Created"
    SUCCEEDED = "Succeeded"
    CANCELLED = "Cancelled"
    EXPIRED = "Expired"
    BILLING_FAILED = "BillingFailed"
    FAILED = "Failed"
    SPLIT = "Split"
    MERGED = "Merged"


class QuotaRequestState(str, enum.Enum):
    ACCEPTED = "Accepted"
    INVALID = "Invalid"
    SUCCEEDED = "Succeeded"
    FAILED = "Failed"
    IN_PROGRESS = "InProgress"


class ReservationBillingPlan(str, enum.Enum):
    UPFRONT = "Upfront"
    MONTHLY = "Monthly"


class ReservationStatusCode(str, enum.Enum):
    NONE = "None"
    PENDING = "Pending"
    PROCESSING = "Processing"
    ACTIVE = "Active"
    PURCHASE_ERROR = "PurchaseError"
    PAYMENT_INSTRUMENT_ERROR = "PaymentInstrumentError"
    SPLIT = "Split"
    MERGED = "Merged"
    EXPIRED = "Expired"
    SUCCEEDED = "Succeeded"


class ReservationTerm(str, enum.Enum):
    P1Y = "P1Y"
    P3Y = "P3Y"
    P5Y = "P5Y"


class ReservedResourceType(str, enum.Enum):
    VIRTUAL_MACHINES = "VirtualMachines"
    SQL_DATABASES = "SqlDatabases"
    SUSE_LINUX = "SuseLinux"
    COSMOS_DB = "CosmosDb"
    RED_HAT = "RedHat"
    SQL_DATA_WAREHOUSE = "SqlDataWarehouse"
    VMWARE_CLOUD_SIMPLE = "VMwareCloudSimple"
    RED_HAT_OSA = "RedHatOsa"
    DATABRICKS = "Databricks"
    APP_SERVICE = "AppService"
    MANAGED_DISK = "ManagedDisk"
    BLOCK_BLOB = "BlockBlob"
    REDIS_CACHE = "RedisCache"
    AZURE_DATA_EXPLORER = "AzureDataExplorer"
    MY_SQL = "MySql"
    MARIA_DB = "MariaDb"
    POSTGRE_SQL = "PostgreSql"
    DEDICATED_HOST = "DedicatedHost"
    SAP_HANA = "SapHana"
    SQL_AZURE_HYBRID_BENEFIT = "SqlAzureHybridBenefit"
    AVS = "AVS"
    DATA_FACTORY = "DataFactory"
    NET_APP_STORAGE = "NetAppStorage"
    AZURE_FILES = "AzureFiles"
    SQL_EDGE = "SqlEdge"
    VIRTUAL_MACHINE_SOFTWARE = "VirtualMachineSoftware"


class ResourceTypesName(str, enum.Enum):
    STANDARD = "standard"
    DEDICATED = "dedicated"
    LOW_PRIORITY = "lowPriority"
    SHARED = "shared"
    SERVICE_SPECIFIC = "serviceSpecific"


class ReservationKind(str, enum.Enum):
    MICROSOFT_COMPUTE = "Microsoft.Compute"


class UserFriendlyAppliedScopeType(str, enum.Enum):
    NONE = "None"
    SHARED = "Shared"
    SINGLE = "Single"
    RESOURCE_GROUP = "ResourceGroup"
    MANAGEMENT_GROUP = "ManagementGroup"


class UserFriendlyRenewState(str, enum.Enum):
    ON = "On"
    OFF = "Off"
    RENEWED = "Renewed"
    NOT_RENEWED = "NotRenewed"
    NOT_APPLICABLE = "NotApplicable"


# shared building blocks


class Price(AzureModel):
    currency_code: Optional[str] = Field(None, alias="currencyCode")
    amount: Optional[float] = None


class SkuName(AzureModel):
    name: Optional[str] = None


class AppliedScopeProperties(AzureModel):
    tenant_id: Optional[str] = Field(None, alias="tenantId")
    management_group_id: Optional[str] = Field(None, alias="managementGroupId")
    subscription_id: Optional[str] = Field(None, alias="subscriptionId")
    resource_group_id: Optional[str] = Field(None, alias="resourceGroupId")
    display_name: Optional[str] = Field(None, alias="displayName")


class ExtendedStatusInfo(AzureModel):
    status_code: Optional[OpenEnum[ReservationStatusCode]] = Field(
        None, alias="statusCode"
    )
    message: Optional[str] = None


class PaymentDetail(AzureModel):
    due_date: Optional[datetime.date] = Field(None, alias="dueDate")
    payment_date: Optional[datetime.date] = Field(None, alias="paymentDate")
    pricing_currency_total: Optional[Price] = Field(None, alias="pricingCurrencyTotal")
    billing_currency_total: Optional[Price] = Field(None, alias="billingCurrencyTotal")
    billing_account: Optional[str] = Field(None, alias="billingAccount")
    status: Optional[OpenEnum[PaymentStatus]] = None
    extended_status_info: Optional[ExtendedStatusInfo] = Field(
        None, alias="extendedStatusInfo"
    )


# purchasing


class PurchaseRequestProperties(AzureModel):
    reserved_resource_type: Optional[OpenEnum[ReservedResourceType]] = Field(
        None, alias="reservedResourceType"
    )
    billing_scope_id: Optional[str] = Field(None, alias="billingScopeId")
    term: Optional[OpenEnum[ReservationTerm]] = None
    billing_plan: Optional[OpenEnum[ReservationBillingPlan]] = Field(
        None, alias="billingPlan"
    )
    quantity: Optional[int] = None
    display_name: Optional[str] = Field(None, alias="displayName")
    applied_scope_type: Optional[OpenEnum[AppliedScopeType]] = Field(
        None, alias="appliedScopeType"
    )
    applied_scopes: Optional[List[str]] = Field(None, alias="appliedScopes")
    applied_scope_properties: Optional[AppliedScopeProperties] = Field(
        None, alias="appliedScopeProperties"
    )
    renew: Optional[bool] = None
    reserved_resource_properties: Optional[Dict[str, Any]] = Field(
        None, alias="reservedResourceProperties"
    )
    review_date_time: Optional[datetime.datetime] = Field(
        None, alias="reviewDateTime"
    )


class PurchaseRequest(AzureModel):
    sku: Optional[SkuName] = None
    location: Optional[str] = None
    properties: Optional[PurchaseRequestProperties] = None


class CalculatePriceResponseProperties(AzureModel):
    # billingCurrencyTotal and pricingCurrencyTotal are inline {currencyCode, amount}
    billing_currency_total: Optional[Price] = Field(None, alias="billingCurrencyTotal")
    net_total: Optional[float] = Field(None, alias="netTotal")
    tax_total: Optional[float] = Field(None, alias="taxTotal")
    grand_total: Optional[float] = Field(None, alias="grandTotal")
    is_tax_included: Optional[bool] = Field(None, alias="isTaxIncluded")
    is_billing_partner_managed: Optional[bool] = Field(
        None, alias="isBillingPartnerManaged"
    )
    reservation_order_id: Optional[str] = Field(None, alias="reservationOrderId")
    sku_title: Optional[str] = Field(None, alias="skuTitle")
    sku_description: Optional[str] = Field(None, alias="skuDescription")
    pricing_currency_total: Optional[Price] = Field(None, alias="pricingCurrencyTotal")
    payment_schedule: Optional[List[PaymentDetail]] = Field(
        None, alias="paymentSchedule"
    )


class CalculatePriceResponse(AzureModel):
    properties: Optional[CalculatePriceResponseProperties] = None


class Commitment(AzureModel):
    price: Price = flattened(Price)
    grain: Optional[OpenEnum[CommitmentGrain]] = None


class SavingsPlanPurchaseRequestProperties(AzureModel):
    display_name: Optional[str] = Field(None, alias="displayName")
    billing_scope_id: Optional[str] = Field(None, alias="billingScopeId")
    term: Optional[OpenEnum[BenefitTerm]] = None
    billing_plan: Optional[OpenEnum[BillingPlan]] = Field(None, alias="billingPlan")
    applied_scope_type: Optional[OpenEnum[AppliedScopeType]] = Field(
        None, alias="appliedScopeType"
    )
    applied_scope_properties: Optional[AppliedScopeProperties] = Field(
        None, alias="appliedScopeProperties"
    )
    commitment: Optional[Commitment] = None


class SavingsPlanPurchaseRequest(AzureModel):
    sku: Optional[SkuName] = None
    properties: Optional[SavingsPlanPurchaseRequestProperties] = None


# reservations


class ReservationSplitProperties(AzureModel):
    split_destinations: Optional[List[str]] = Field(None, alias="splitDestinations")
    split_source: Optional[str] = Field(None, alias="splitSource")


class ReservationMergeProperties(AzureModel):
    merge_destination: Optional[str] = Field(None, alias="mergeDestination")
    merge_sources: Optional[List[str]] = Field(None, alias="mergeSources")


class ReservationSwapProperties(AzureModel):
    swap_source: Optional[str] = Field(None, alias="swapSource")
    swap_destination: Optional[str] = Field(None, alias="swapDestination")


class RenewPropertiesResponse(AzureModel):
    purchase_properties: Optional[PurchaseRequest] = Field(
        None, alias="purchaseProperties"
    )
    pricing_currency_total: Optional[Price] = Field(None, alias="pricingCurrencyTotal")
    billing_currency_total: Optional[Price] = Field(None, alias="billingCurrencyTotal")


class ReservationUtilizationAggregates(AzureModel):
    grain: Optional[float] = None
    grain_unit: Optional[str] = Field(None, alias="grainUnit")
    value: Optional[float] = None
    value_unit: Optional[str] = Field(None, alias="valueUnit")


class ReservationUtilization(AzureModel):
    trend: Optional[str] = None
    aggregates: Optional[List[ReservationUtilizationAggregates]] = None


class ReservationsProperties(AzureModel):
    reserved_resource_type: Optional[OpenEnum[ReservedResourceType]] = Field(
        None, alias="reservedResourceType"
    )
    instance_flexibility: Optional[OpenEnum[InstanceFlexibility]] = Field(
        None, alias="instanceFlexibility"
    )
    display_name: Optional[str] = Field(None, alias="displayName")
    applied_scopes: Optional[List[str]] = Field(None, alias="appliedScopes")
    applied_scope_type: Optional[OpenEnum[AppliedScopeType]] = Field(
        None, alias="appliedScopeType"
    )
    archived: Optional[bool] = None
    capabilities: Optional[str] = None
    quantity: Optional[int] = None
    provisioning_state: Optional[OpenEnum[ProvisioningState]] = Field(
        None, alias="provisioningState"
    )
    effective_date_time: Optional[datetime.datetime] = Field(
        None, alias="effectiveDateTime"
    )
    benefit_start_time: Optional[datetime.datetime] = Field(
        None, alias="benefitStartTime"
    )
    last_updated_date_time: Optional[datetime.datetime] = Field(
        None, alias="lastUpdatedDateTime"
    )
    expiry_date: Optional[datetime.date] = Field(None, alias="expiryDate")
    expiry_date_time: Optional[datetime.datetime] = Field(
        None, alias="expiryDateTime"
    )
    review_date_time: Optional[datetime.datetime] = Field(
        None, alias="reviewDateTime"
    )
    sku_description: Optional[str] = Field(None, alias="skuDescription")
    extended_status_info: Optional[ExtendedStatusInfo] = Field(
        None, alias="extendedStatusInfo"
    )
    billing_plan: Optional[OpenEnum[ReservationBillingPlan]] = Field(
        None, alias="billingPlan"
    )
    display_provisioning_state: Optional[OpenEnum[DisplayProvisioningState]] = Field(
        None, alias="displayProvisioningState"
    )
    provisioning_sub_state: Optional[str] = Field(None, alias="provisioningSubState")
    purchase_date: Optional[datetime.date] = Field(None, alias="purchaseDate")
    purchase_date_time: Optional[datetime.datetime] = Field(
        None, alias="purchaseDateTime"
    )
    split_properties: Optional[ReservationSplitProperties] = Field(
        None, alias="splitProperties"
    )
    merge_properties: Optional[ReservationMergeProperties] = Field(
        None, alias="mergeProperties"
    )
    swap_properties: Optional[ReservationSwapProperties] = Field(
        None, alias="swapProperties"
    )
    applied_scope_properties: Optional[AppliedScopeProperties] = Field(
        None, alias="appliedScopeProperties"
    )
    billing_scope_id: Optional[str] = Field(None, alias="billingScopeId")
    renew: Optional[bool] = None
    renew_source: Optional[str] = Field(None, alias="renewSource")
    renew_destination: Optional[str] = Field(None, alias="renewDestination")
    renew_properties: Optional[RenewPropertiesResponse] = Field(
        None, alias="renewProperties"
    )
    term: Optional[OpenEnum[ReservationTerm]] = None
    user_friendly_applied_scope_type: Optional[
        OpenEnum[UserFriendlyAppliedScopeType]
    ] = Field(None, alias="userFriendlyAppliedScopeType")
    user_friendly_renew_state: Optional[OpenEnum[UserFriendlyRenewState]] = Field(
        None, alias="userFriendlyRenewState"
    )
    utilization: Optional[ReservationUtilization] = None


class ReservationResponse(AzureModel):
    proxy_resource: ProxyResource = flattened(ProxyResource)
    location: Optional[str] = None
    etag: Optional[int] = None
    sku: Optional[SkuName] = None
    properties: Optional[ReservationsProperties] = None
    kind: Optional[OpenEnum[ReservationKind]] = None
    system_data: Optional[SystemData] = Field(None, alias="systemData")


class ReservationList(AzureModel):
    value: Optional[List[ReservationResponse]] = None
    next_link: Optional[str] = Field(None, alias="nextLink")


class ReservationSummary(AzureModel):
    succeeded_count: Optional[float] = Field(None, alias="succeededCount")
    failed_count: Optional[float] = Field(None, alias="failedCount")
    expiring_count: Optional[float] = Field(None, alias="expiringCount")
    expired_count: Optional[float] = Field(None, alias="expiredCount")
    pending_count: Optional[float] = Field(None, alias="pendingCount")
    cancelled_count: Optional[float] = Field(None, alias="cancelledCount")
    processing_count: Optional[float] = Field(None, alias="processingCount")
    warning_count: Optional[float] = Field(None, alias="warningCount")
    no_benefit_count: Optional[float] = Field(None, alias="noBenefitCount")


class ReservationsListResult(AzureModel):
    value: Optional[List[ReservationResponse]] = None
    next_link: Optional[str] = Field(None, alias="nextLink")
    summary: Optional[ReservationSummary] = None


class AvailableScopeRequestProperties(AzureModel):
    scopes: Optional[List[str]] = None


class AvailableScopeRequest(AzureModel):
    properties: Optional[AvailableScopeRequestProperties] = None


class ScopeProperties(AzureModel):
    scope: Optional[str] = None
    valid: Optional[bool] = None


class SubscriptionScopeProperties(AzureModel):
    scopes: Optional[List[ScopeProperties]] = None


class AvailableScopeProperties(AzureModel):
    properties: Optional[SubscriptionScopeProperties] = None


class SplitProperties(AzureModel):
    quantities: Optional[List[int]] = None
    reservation_id: Optional[str] = Field(None, alias="reservationId")


class SplitRequest(AzureModel):
    properties: Optional[SplitProperties] = None


class MergeProperties(AzureModel):
    sources: Optional[List[str]] = None


class MergeRequest(AzureModel):
    properties: Optional[MergeProperties] = None


class PatchPropertiesRenewProperties(AzureModel):
    purchase_properties: Optional[PurchaseRequest] = Field(
        None, alias="purchaseProperties"
    )


class PatchProperties(AzureModel):
    applied_scope_type: Optional[OpenEnum[AppliedScopeType]] = Field(
        None, alias="appliedScopeType"
    )
    applied_scopes: Optional[List[str]] = Field(None, alias="appliedScopes")
    applied_scope_properties: Optional[AppliedScopeProperties] = Field(
        None, alias="appliedScopeProperties"
    )
    instance_flexibility: Optional[OpenEnum[InstanceFlexibility]] = Field(
        None, alias="instanceFlexibility"
    )
    name: Optional[str] = None
    renew: Optional[bool] = None
    renew_properties: Optional[PatchPropertiesRenewProperties] = Field(
        None, alias="renewProperties"
    )
    review_date_time: Optional[datetime.datetime] = Field(
        None, alias="reviewDateTime"
    )


class Patch(AzureModel):
    properties: Optional[PatchProperties] = None


# reservation orders


class ReservationOrderBillingPlanInformation(AzureModel):
    pricing_currency_total: Optional[Price] = Field(None, alias="pricingCurrencyTotal")
    start_date: Optional[datetime.date] = Field(None, alias="startDate")
    next_payment_due_date: Optional[datetime.date] = Field(
        None, alias="nextPaymentDueDate"
    )
    transactions: Optional[List[PaymentDetail]] = None


class ReservationOrderProperties(AzureModel):
    display_name: Optional[str] = Field(None, alias="displayName")
    request_date_time: Optional[datetime.datetime] = Field(
        None, alias="requestDateTime"
    )
    created_date_time: Optional[datetime.datetime] = Field(
        None, alias="createdDateTime"
    )
    expiry_date: Optional[datetime.date] = Field(None, alias="expiryDate")
    expiry_date_time: Optional[datetime.datetime] = Field(
        None, alias="expiryDateTime"
    )
    benefit_start_time: Optional[datetime.datetime] = Field(
        None, alias="benefitStartTime"
    )
    original_quantity: Optional[int] = Field(None, alias="originalQuantity")
    term: Optional[OpenEnum[ReservationTerm]] = None
    provisioning_state: Optional[OpenEnum[ProvisioningState]] = Field(
        None, alias="provisioningState"
    )
    billing_plan: Optional[OpenEnum[ReservationBillingPlan]] = Field(
        None, alias="billingPlan"
    )
    plan_information: Optional[ReservationOrderBillingPlanInformation] = Field(
        None, alias="planInformation"
    )
    reservations: Optional[List[ReservationResponse]] = None
    review_date_time: Optional[datetime.datetime] = Field(
        None, alias="reviewDateTime"
    )


class ReservationOrderResponse(AzureModel):
    etag: Optional[int] = None
    id: Optional[str] = None
    name: Optional[str] = None
    properties: Optional[ReservationOrderProperties] = None
    type_: Optional[str] = Field(None, alias="type")
    system_data: Optional[SystemData] = Field(None, alias="systemData")


class ReservationOrderList(AzureModel):
    value: Optional[List[ReservationOrderResponse]] = None
    next_link: Optional[str] = Field(None, alias="nextLink")


class ChangeDirectoryRequest(AzureModel):
    destination_tenant_id: Optional[str] = Field(None, alias="destinationTenantId")


class ChangeDirectoryResult(AzureModel):
    id: Optional[str] = None
    name: Optional[str] = None
    is_succeeded: Optional[bool] = Field(None, alias="isSucceeded")
    error: Optional[str] = None


class ChangeDirectoryResponse(AzureModel):
    reservation_order: Optional[ChangeDirectoryResult] = Field(
        None, alias="reservationOrder"
    )
    reservations: Optional[List[ChangeDirectoryResult]] = None


# catalog and applied reservations


class SkuProperty(AzureModel):
    name: Optional[str] = None
    value: Optional[str] = None


class SkuRestriction(AzureModel):
    type_: Optional[str] = Field(None, alias="type")
    values: Optional[List[str]] = None
    reason_code: Optional[str] = Field(None, alias="reasonCode")


class SkuCapability(AzureModel):
    name: Optional[str] = None
    value: Optional[str] = None


class Catalog(AzureModel):
    resource_type: Optional[str] = Field(None, alias="resourceType")
    name: Optional[str] = None
    # maps a term to the billing plans available for it
    billing_plans: Optional[Dict[str, List[OpenEnum[ReservationBillingPlan]]]] = Field(
        None, alias="billingPlans"
    )
    terms: Optional[List[OpenEnum[ReservationTerm]]] = None
    locations: Optional[List[str]] = None
    sku_properties: Optional[List[SkuProperty]] = Field(None, alias="skuProperties")
    msrp: Optional[Dict[str, Any]] = None
    restrictions: Optional[List[SkuRestriction]] = None
    tier: Optional[str] = None
    size: Optional[str] = None
    capabilities: Optional[List[SkuCapability]] = None


class CatalogsResult(AzureModel):
    value: Optional[List[Catalog]] = None
    next_link: Optional[str] = Field(None, alias="nextLink")
    total_items: Optional[int] = Field(None, alias="totalItems")


class AppliedReservationList(AzureModel):
    value: Optional[List[str]] = None
    next_link: Optional[str] = Field(None, alias="nextLink")


class AppliedReservationsProperties(AzureModel):
    reservation_order_ids: Optional[AppliedReservationList] = Field(
        None, alias="reservationOrderIds"
    )


class AppliedReservations(AzureModel):
    id: Optional[str] = None
    name: Optional[str] = None
    type_: Optional[str] = Field(None, alias="type")
    properties: Optional[AppliedReservationsProperties] = None


# exchange


class ReservationToReturn(AzureModel):
    reservation_id: Optional[str] = Field(None, alias="reservationId")
    quantity: Optional[int] = None


class BillingInformation(AzureModel):
    billing_currency_total_paid_amount: Optional[Price] = Field(
        None, alias="billingCurrencyTotalPaidAmount"
    )
    billing_currency_prorated_amount: Optional[Price] = Field(
        None, alias="billingCurrencyProratedAmount"
    )
    billing_currency_remaining_commitment_amount: Optional[Price] = Field(
        None, alias="billingCurrencyRemainingCommitmentAmount"
    )


class OperationResultError(AzureModel):
    code: Optional[str] = None
    message: Optional[str] = None


class ExchangePolicyError(AzureModel):
    code: Optional[str] = None
    message: Optional[str] = None


class ExchangePolicyErrors(AzureModel):
    policy_errors: Optional[List[ExchangePolicyError]] = Field(
        None, alias="policyErrors"
    )


class CalculateExchangeRequestProperties(AzureModel):
    reservations_to_purchase: Optional[List[PurchaseRequest]] = Field(
        None, alias="reservationsToPurchase"
    )
    savings_plans_to_purchase: Optional[List[SavingsPlanPurchaseRequest]] = Field(
        None, alias="savingsPlansToPurchase"
    )
    reservations_to_exchange: Optional[List[ReservationToReturn]] = Field(
        None, alias="reservationsToExchange"
    )


class CalculateExchangeRequest(AzureModel):
    properties: Optional[CalculateExchangeRequestProperties] = None


class ReservationToPurchaseCalculateExchange(AzureModel):
    properties: Optional[PurchaseRequest] = None
    billing_currency_total: Optional[Price] = Field(None, alias="billingCurrencyTotal")


class SavingsPlanToPurchaseCalculateExchange(AzureModel):
    properties: Optional[SavingsPlanPurchaseRequest] = None
    billing_currency_total: Optional[Price] = Field(None, alias="billingCurrencyTotal")


class ReservationToExchange(AzureModel):
    reservation_id: Optional[str] = Field(None, alias="reservationId")
    quantity: Optional[int] = None
    billing_refund_amount: Optional[Price] = Field(None, alias="billingRefundAmount")
    billing_information: Optional[BillingInformation] = Field(
        None, alias="billingInformation"
    )


class CalculateExchangeResponseProperties(AzureModel):
    session_id: Optional[str] = Field(None, alias="sessionId")
    net_payable: Optional[Price] = Field(None, alias="netPayable")
    refunds_total: Optional[Price] = Field(None, alias="refundsTotal")
    purchases_total: Optional[Price] = Field(None, alias="purchasesTotal")
    reservations_to_purchase: Optional[
        List[ReservationToPurchaseCalculateExchange]
    ] = Field(None, alias="reservationsToPurchase")
    savings_plans_to_purchase: Optional[
        List[SavingsPlanToPurchaseCalculateExchange]
    ] = Field(None, alias="savingsPlansToPurchase")
    reservations_to_exchange: Optional[List[ReservationToExchange]] = Field(
        None, alias="reservationsToExchange"
    )
    policy_result: Optional[ExchangePolicyErrors] = Field(None, alias="policyResult")


class CalculateExchangeOperationResultResponse(AzureModel):
    id: Optional[str] = None
    name: Optional[str] = None
    status: Optional[OpenEnum[OperationStatus]] = None
    properties: Optional[CalculateExchangeResponseProperties] = None
    error: Optional[OperationResultError] = None


class ExchangeRequestProperties(AzureModel):
    session_id: Optional[str] = Field(None, alias="sessionId")


class ExchangeRequest(AzureModel):
    properties: Optional[ExchangeRequestProperties] = None


class ReservationToPurchaseExchange(AzureModel):
    reservation_order_id: Optional[str] = Field(None, alias="reservationOrderId")
    reservation_id: Optional[str] = Field(None, alias="reservationId")
    properties: Optional[PurchaseRequest] = None
    billing_currency_total: Optional[Price] = Field(None, alias="billingCurrencyTotal")
    status: Optional[OpenEnum[OperationStatus]] = None


class SavingsPlanToPurchaseExchange(AzureModel):
    savings_plan_order_id: Optional[str] = Field(None, alias="savingsPlanOrderId")
    savings_plan_id: Optional[str] = Field(None, alias="savingsPlanId")
    properties: Optional[SavingsPlanPurchaseRequest] = None
    billing_currency_total: Optional[Price] = Field(None, alias="billingCurrencyTotal")
    status: Optional[OpenEnum[OperationStatus]] = None


class ReservationToReturnForExchange(AzureModel):
    reservation_id: Optional[str] = Field(None, alias="reservationId")
    quantity: Optional[int] = None
    billing_refund_amount: Optional[Price] = Field(None, alias="billingRefundAmount")
    billing_information: Optional[BillingInformation] = Field(
        None, alias="billingInformation"
    )
    status: Optional[OpenEnum[OperationStatus]] = None


class ExchangeResponseProperties(AzureModel):
    session_id: Optional[str] = Field(None, alias="sessionId")
    net_payable: Optional[Price] = Field(None, alias="netPayable")
    refunds_total: Optional[Price] = Field(None, alias="refundsTotal")
    purchases_total: Optional[Price] = Field(None, alias="purchasesTotal")
    reservations_to_purchase: Optional[List[ReservationToPurchaseExchange]] = Field(
        None, alias="reservationsToPurchase"
    )
    savings_plans_to_purchase: Optional[List[SavingsPlanToPurchaseExchange]] = Field(
        None, alias="savingsPlansToPurchase"
    )
    reservations_to_exchange: Optional[List[ReservationToReturnForExchange]] = Field(
        None, alias="reservationsToExchange"
    )
    policy_result: Optional[ExchangePolicyErrors] = Field(None, alias="policyResult")


class ExchangeOperationResultResponse(AzureModel):
    id: Optional[str] = None
    name: Optional[str] = None
    status: Optional[OpenEnum[ExchangeStatus]] = None
    properties: Optional[ExchangeResponseProperties] = None
    error: Optional[OperationResultError] = None


# operations


class OperationDisplay(AzureModel):
    provider: Optional[str] = None
    resource: Optional[str] = None
    operation: Optional[str] = None
    description: Optional[str] = None


class OperationResponse(AzureModel):
    name: Optional[str] = None
    is_data_action: Optional[bool] = Field(None, alias="isDataAction")
    display: Optional[OperationDisplay] = None
    origin: Optional[str] = None
    properties: Optional[Dict[str, Any]] = None


class OperationList(AzureModel):
    value: Optional[List[OperationResponse]] = None
    next_link: Optional[str] = Field(None, alias="nextLink")


# quotas


class ResourceName(AzureModel):
    value: Optional[str] = None
    localized_value: Optional[str] = Field(None, alias="localizedValue")


class QuotaProperties(AzureModel):
    limit: Optional[int] = None
    current_value: Optional[int] = Field(None, alias="currentValue")
    unit: Optional[str] = None
    name: Optional[ResourceName] = None
    resource_type: Optional[OpenEnum[ResourceTypesName]] = Field(
        None, alias="resourceType"
    )
    quota_period: Optional[str] = Field(None, alias="quotaPeriod")
    properties: Optional[Dict[str, Any]] = None


class CurrentQuotaLimitBase(AzureModel):
    id: Optional[str] = None
    name: Optional[str] = None
    type_: Optional[str] = Field(None, alias="type")
    properties: Optional[QuotaProperties] = None


class QuotaLimits(AzureModel):
    value: Optional[List[CurrentQuotaLimitBase]] = None
    next_link: Optional[str] = Field(None, alias="nextLink")


class QuotaRequestStatusDetails(AzureModel):
    provisioning_state: Optional[OpenEnum[QuotaRequestState]] = Field(
        None, alias="provisioningState"
    )
    message: Optional[str] = None


class QuotaRequestSubmitResponse201(AzureModel):
    """What a quota change returns when it has been queued rather than applied"""

    id: Optional[str] = None
    name: Optional[str] = None
    type_: Optional[str] = Field(None, alias="type")
    properties: Optional[QuotaRequestStatusDetails] = None


class SubRequest(AzureModel):
    limit: Optional[int] = None
    name: Optional[ResourceName] = None
    resource_type: Optional[str] = Field(None, alias="resourceType")
    unit: Optional[str] = None
    provisioning_state: Optional[OpenEnum[QuotaRequestState]] = Field(
        None, alias="provisioningState"
    )
    message: Optional[str] = None
    sub_request_id: Optional[str] = Field(None, alias="subRequestId")


class QuotaRequestProperties(AzureModel):
    provisioning_state: Optional[OpenEnum[QuotaRequestState]] = Field(
        None, alias="provisioningState"
    )
    message: Optional[str] = None
    request_submit_time: Optional[datetime.datetime] = Field(
        None, alias="requestSubmitTime"
    )
    value: Optional[List[SubRequest]] = None


class QuotaRequestDetails(AzureModel):
    id: Optional[str] = None
    name: Optional[str] = None
    type_: Optional[str] = Field(None, alias="type")
    properties: Optional[QuotaRequestProperties] = None


class QuotaRequestDetailsList(AzureModel):
    value: Optional[List[QuotaRequestDetails]] = None
    next_link: Optional[str] = Field(None, alias="nextLink")
