"""Request and response bodies for Microsoft.EdgeOrder"""

from __future__ import annotations

import datetime
import enum
from typing import Any, Dict, List, Optional

from pydantic import Field

from azmgmt.core.models import (
    AzureModel,
    ErrorDetail,
    OpenEnum,
    ProxyResource,
    SystemData,
    TrackedResource,
    flattened,
    polymorphic,
)


# enumerations


class AddressValidationStatus(str, enum.Enum):
    VALID = "Valid"
    INVALID = "Invalid"
    AMBIGUOUS = "Ambiguous"


class AddressType(str, enum.Enum):
    NONE = "None"
    RESIDENTIAL = "Residential"
    COMMERCIAL = "Commercial"


class AvailabilityStage(str, enum.Enum):
    AVAILABLE = "Available"
    COMING_SOON = "ComingSoon"
    PREVIEW = "Preview"
    DEPRECATED = "Deprecated"
    SIGNUP = "Signup"
    UNAVAILABLE = "Unavailable"


class DisabledReason(str, enum.Enum):
    NONE = "None"
    COUNTRY = "Country"
    REGION = "Region"
    FEATURE = "Feature"
    OFFER_TYPE = "OfferType"
    NO_SUBSCRIPTION_INFO = "NoSubscriptionInfo"
    NOT_AVAILABLE = "NotAvailable"
    OUT_OF_STOCK = "OutOfStock"


class MeteringType(str, enum.Enum):
    ONE_TIME = "OneTime"
    RECURRING = "Recurring"
    ADHOC = "Adhoc"


class BillingType(str, enum.Enum):
    PAV2 = "Pav2"
    PURCHASE = "Purchase"


class ChargingType(str, enum.Enum):
    PER_ORDER = "PerOrder"
    PER_DEVICE = "PerDevice"


class DescriptionType(str, enum.Enum):
    BASE = "Base"


class LengthHeightUnit(str, enum.Enum):
    IN = "IN"
    CM = "CM"


class WeightUnit(str, enum.Enum):
    LBS = "LBS"
    KGS = "KGS"


class DoubleEncryptionStatus(str, enum.Enum):
    DISABLED = "Disabled"
    ENABLED = "Enabled"


class FilterablePropertyType(str, enum.Enum):
    SHIP_TO_COUNTRIES = "ShipToCountries"
    DOUBLE_ENCRYPTION_STATUS = "DoubleEncryptionStatus"


class ImageType(str, enum.Enum):
    MAIN_IMAGE = "MainImage"
    BULLET_IMAGE = "BulletImage"
    GENERIC_IMAGE = "GenericImage"


class LinkType(str, enum.Enum):
    GENERIC = "Generic"
    TERMS_AND_CONDITIONS = "TermsAndConditions"
    SPECIFICATION = "Specification"
    DOCUMENTATION = "Documentation"
    KNOW_MORE = "KnowMore"
    SIGN_UP = "SignUp"


class NotificationStageName(str, enum.Enum):
    SHIPPED = "Shipped"
    DELIVERED = "Delivered"


class OrderItemType(str, enum.Enum):
    PURCHASE = "Purchase"
    RENTAL = "Rental"


class CancellationStatus(str, enum.Enum):
    CANCELLABLE = "Cancellable"
    CANCELLABLE_WITH_FEE = "CancellableWithFee"
    NOT_CANCELLABLE = "NotCancellable"


class DeletionStatus(str, enum.Enum):
    ALLOWED = "Allowed"
    NOT_ALLOWED = "NotAllowed"


class ReturnStatus(str, enum.Enum):
    RETURNABLE = "Returnable"
    RETURNABLE_WITH_FEE = "ReturnableWithFee"
    NOT_RETURNABLE = "NotReturnable"


class StageStatus(str, enum.Enum):
    NONE = "None"
    IN_PROGRESS = "InProgress"
    SUCCEEDED = "Succeeded"
    FAILED = "Failed"
    CANCELLED = "Cancelled"
    CANCELLING = "Cancelling"


class StageName(str, enum.Enum):
    PLACED = "Placed"
    IN_REVIEW = "InReview"
    CONFIRMED = "Confirmed"
    READY_TO_SHIP = "ReadyToShip"
    SHIPPED = "Shipped"
    DELIVERED = "Delivered"
    IN_USE = "InUse"
    RETURN_INITIATED = "ReturnInitiated"
    RETURN_PICKED_UP = "ReturnPickedUp"
    RETURNED_TO_MICROSOFT = "ReturnedToMicrosoft"
    RETURN_COMPLETED = "ReturnCompleted"
    CANCELLED = "Cancelled"


class PreferredShipmentType(str, enum.Enum):
    CUSTOMER_MANAGED = "CustomerManaged"
    MICROSOFT_MANAGED = "MicrosoftManaged"


# addresses


class ShippingAddress(AzureModel):
    street_address1: str = Field(alias="streetAddress1")
    street_address2: Optional[str] = Field(None, alias="streetAddress2")
    street_address3: Optional[str] = Field(None, alias="streetAddress3")
    city: Optional[str] = None
    state_or_province: Optional[str] = Field(None, alias="stateOrProvince")
    country: str
    postal_code: Optional[str] = Field(None, alias="postalCode")
    zip_extended_code: Optional[str] = Field(None, alias="zipExtendedCode")
    company_name: Optional[str] = Field(None, alias="companyName")
    address_type: Optional[OpenEnum[AddressType]] = Field(None, alias="addressType")


class ContactDetails(AzureModel):
    contact_name: str = Field(alias="contactName")
    phone: str
    phone_extension: Optional[str] = Field(None, alias="phoneExtension")
    mobile: Optional[str] = None
    email_list: List[str] = Field(alias="emailList")


class AddressProperties(AzureModel):
    shipping_address: Optional[ShippingAddress] = Field(None, alias="shippingAddress")
    contact_details: ContactDetails = Field(alias="contactDetails")
    address_validation_status: Optional[OpenEnum[AddressValidationStatus]] = Field(
        None, alias="addressValidationStatus"
    )


class AddressResource(AzureModel):
    """Address resource, i.e. somewhere an order can be shipped to"""

    tracked_resource: TrackedResource = flattened(TrackedResource)
    properties: AddressProperties
    system_data: Optional[SystemData] = Field(None, alias="systemData")


class AddressResourceList(AzureModel):
    value: Optional[List[AddressResource]] = None
    next_link: Optional[str] = Field(None, alias="nextLink")


class AddressUpdateProperties(AzureModel):
    shipping_address: Optional[ShippingAddress] = Field(None, alias="shippingAddress")
    contact_details: Optional[ContactDetails] = Field(None, alias="contactDetails")


class AddressUpdateParameter(AzureModel):
    properties: Optional[AddressUpdateProperties] = None
    tags: Optional[Dict[str, Any]] = None


class AddressDetails(AzureModel):
    forward_address: AddressProperties = Field(alias="forwardAddress")
    return_address: Optional[AddressProperties] = Field(None, alias="returnAddress")


# product catalog


class HierarchyInformation(AzureModel):
    product_family_name: Optional[str] = Field(None, alias="productFamilyName")
    product_line_name: Optional[str] = Field(None, alias="productLineName")
    product_name: Optional[str] = Field(None, alias="productName")
    configuration_name: Optional[str] = Field(None, alias="configurationName")


class Link(AzureModel):
    link_type: Optional[OpenEnum[LinkType]] = Field(None, alias="linkType")
    link_url: Optional[str] = Field(None, alias="linkUrl")


class Description(AzureModel):
    description_type: Optional[OpenEnum[DescriptionType]] = Field(
        None, alias="descriptionType"
    )
    short_description: Optional[str] = Field(None, alias="shortDescription")
    long_description: Optional[str] = Field(None, alias="longDescription")
    keywords: Optional[List[str]] = None
    attributes: Optional[List[str]] = None
    links: Optional[List[Link]] = None


class ImageInformation(AzureModel):
    image_type: Optional[OpenEnum[ImageType]] = Field(None, alias="imageType")
    image_url: Optional[str] = Field(None, alias="imageUrl")


class MeterDetails(AzureModel):
    """The base of the meter details, billingType says which kind it is"""

    billing_type: OpenEnum[BillingType] = Field(alias="billingType")
    multiplier: Optional[float] = None
    charging_type: Optional[OpenEnum[ChargingType]] = Field(
        None, alias="chargingType"
    )


class Pav2MeterDetails(AzureModel):
    meter_details: MeterDetails = flattened(MeterDetails)
    meter_guid: Optional[str] = Field(None, alias="meterGuid")


class PurchaseMeterDetails(AzureModel):
    meter_details: MeterDetails = flattened(MeterDetails)
    product_id: Optional[str] = Field(None, alias="productId")
    sku_id: Optional[str] = Field(None, alias="skuId")
    term_id: Optional[str] = Field(None, alias="termId")


MeterDetailsPayload = polymorphic(
    "billingType",
    {"Pav2": Pav2MeterDetails, "Purchase": PurchaseMeterDetails},
    MeterDetails,
)


class BillingMeterDetails(AzureModel):
    name: Optional[str] = None
    meter_details: Optional[MeterDetailsPayload] = Field(None, alias="meterDetails")
    metering_type: Optional[OpenEnum[MeteringType]] = Field(
        None, alias="meteringType"
    )
    frequency: Optional[str] = None


class CostInformation(AzureModel):
    billing_meter_details: Optional[List[BillingMeterDetails]] = Field(
        None, alias="billingMeterDetails"
    )
    billing_info_url: Optional[str] = Field(None, alias="billingInfoUrl")


class AvailabilityInformation(AzureModel):
    availability_stage: Optional[OpenEnum[AvailabilityStage]] = Field(
        None, alias="availabilityStage"
    )
    disabled_reason: Optional[OpenEnum[DisabledReason]] = Field(
        None, alias="disabledReason"
    )
    disabled_reason_message: Optional[str] = Field(None, alias="disabledReasonMessage")


class BasicInformation(AzureModel):
    display_name: Optional[str] = Field(None, alias="displayName")
    description: Optional[Description] = None
    image_information: Optional[List[ImageInformation]] = Field(
        None, alias="imageInformation"
    )
    cost_information: Optional[CostInformation] = Field(None, alias="costInformation")
    availability_information: Optional[AvailabilityInformation] = Field(
        None, alias="availabilityInformation"
    )
    hierarchy_information: Optional[HierarchyInformation] = Field(
        None, alias="hierarchyInformation"
    )


class FilterableProperty(AzureModel):
    type_: OpenEnum[FilterablePropertyType] = Field(alias="type")
    supported_values: List[str] = Field(alias="supportedValues")


class CommonProperties(AzureModel):
    basic_information: BasicInformation = flattened(BasicInformation)
    filterable_properties: Optional[List[FilterableProperty]] = Field(
        None, alias="filterableProperties"
    )


class Specification(AzureModel):
    name: Optional[str] = None
    value: Optional[str] = None


class Dimensions(AzureModel):
    length: Optional[float] = None
    height: Optional[float] = None
    width: Optional[float] = None
    length_height_unit: Optional[OpenEnum[LengthHeightUnit]] = Field(
        None, alias="lengthHeightUnit"
    )
    weight: Optional[float] = None
    depth: Optional[float] = None
    weight_unit: Optional[OpenEnum[WeightUnit]] = Field(None, alias="weightUnit")


class ConfigurationProperties(AzureModel):
    common_properties: CommonProperties = flattened(CommonProperties)
    specifications: Optional[List[Specification]] = None
    dimensions: Optional[Dimensions] = None


class Configuration(AzureModel):
    properties: Optional[ConfigurationProperties] = None


class Configurations(AzureModel):
    value: Optional[List[Configuration]] = None
    next_link: Optional[str] = Field(None, alias="nextLink")


class ProductProperties(AzureModel):
    common_properties: CommonProperties = flattened(CommonProperties)
    configurations: Optional[List[Configuration]] = None


class Product(AzureModel):
    properties: Optional[ProductProperties] = None


class ProductLineProperties(AzureModel):
    common_properties: CommonProperties = flattened(CommonProperties)
    products: Optional[List[Product]] = None


class ProductLine(AzureModel):
    properties: Optional[ProductLineProperties] = None


class ResourceProviderDetails(AzureModel):
    resource_provider_namespace: Optional[str] = Field(
        None, alias="resourceProviderNamespace"
    )


class ProductFamilyProperties(AzureModel):
    common_properties: CommonProperties = flattened(CommonProperties)
    product_lines: Optional[List[ProductLine]] = Field(None, alias="productLines")
    resource_provider_details: Optional[List[ResourceProviderDetails]] = Field(
        None, alias="resourceProviderDetails"
    )


class ProductFamily(AzureModel):
    properties: Optional[ProductFamilyProperties] = None


class ProductFamilies(AzureModel):
    value: Optional[List[ProductFamily]] = None
    next_link: Optional[str] = Field(None, alias="nextLink")


class ProductFamiliesMetadataDetails(AzureModel):
    properties: Optional[ProductFamilyProperties] = None


class ProductFamiliesMetadata(AzureModel):
    value: Optional[List[ProductFamiliesMetadataDetails]] = None
    next_link: Optional[str] = Field(None, alias="nextLink")


class CustomerSubscriptionRegisteredFeatures(AzureModel):
    name: Optional[str] = None
    state: Optional[str] = None


class CustomerSubscriptionDetails(AzureModel):
    registered_features: Optional[List[CustomerSubscriptionRegisteredFeatures]] = Field(
        None, alias="registeredFeatures"
    )
    location_placement_id: Optional[str] = Field(None, alias="locationPlacementId")
    quota_id: str = Field(alias="quotaId")


class ProductFamiliesRequest(AzureModel):
    # maps a region to the filterable properties for that region, kept as is
    filterable_properties: Dict[str, Any] = Field(alias="filterableProperties")
    customer_subscription_details: Optional[CustomerSubscriptionDetails] = Field(
        None, alias="customerSubscriptionDetails"
    )


class ConfigurationFilters(AzureModel):
    hierarchy_information: HierarchyInformation = Field(alias="hierarchyInformation")
    filterable_property: Optional[List[FilterableProperty]] = Field(
        None, alias="filterableProperty"
    )


class ConfigurationsRequest(AzureModel):
    configuration_filters: List[ConfigurationFilters] = Field(
        alias="configurationFilters"
    )
    customer_subscription_details: Optional[CustomerSubscriptionDetails] = Field(
        None, alias="customerSubscriptionDetails"
    )


# orders and order items


class StageDetails(AzureModel):
    stage_status: Optional[OpenEnum[StageStatus]] = Field(None, alias="stageStatus")
    stage_name: Optional[OpenEnum[StageName]] = Field(None, alias="stageName")
    display_name: Optional[str] = Field(None, alias="displayName")
    start_time: Optional[datetime.datetime] = Field(None, alias="startTime")


class OrderProperties(AzureModel):
    order_item_ids: Optional[List[str]] = Field(None, alias="orderItemIds")
    current_stage: Optional[StageDetails] = Field(None, alias="currentStage")
    order_stage_history: Optional[List[StageDetails]] = Field(
        None, alias="orderStageHistory"
    )


class OrderResource(AzureModel):
    proxy_resource: ProxyResource = flattened(ProxyResource)
    properties: OrderProperties
    system_data: Optional[SystemData] = Field(None, alias="systemData")


class OrderResourceList(AzureModel):
    value: Optional[List[OrderResource]] = None
    next_link: Optional[str] = Field(None, alias="nextLink")


class DisplayInfo(AzureModel):
    product_family_display_name: Optional[str] = Field(
        None, alias="productFamilyDisplayName"
    )
    configuration_display_name: Optional[str] = Field(
        None, alias="configurationDisplayName"
    )


class DeviceDetails(AzureModel):
    serial_number: Optional[str] = Field(None, alias="serialNumber")
    management_resource_id: Optional[str] = Field(None, alias="managementResourceId")
    management_resource_tenant_id: Optional[str] = Field(
        None, alias="managementResourceTenantId"
    )


class ProductDetails(AzureModel):
    display_info: Optional[DisplayInfo] = Field(None, alias="displayInfo")
    hierarchy_information: HierarchyInformation = Field(alias="hierarchyInformation")
    count: Optional[int] = None
    product_double_encryption_status: Optional[
        OpenEnum[DoubleEncryptionStatus]
    ] = Field(None, alias="productDoubleEncryptionStatus")
    device_details: Optional[List[DeviceDetails]] = Field(None, alias="deviceDetails")


class NotificationPreference(AzureModel):
    stage_name: OpenEnum[NotificationStageName] = Field(alias="stageName")
    send_notification: bool = Field(alias="sendNotification")


class TransportPreferences(AzureModel):
    preferred_shipment_type: OpenEnum[PreferredShipmentType] = Field(
        alias="preferredShipmentType"
    )


class EncryptionPreferences(AzureModel):
    double_encryption_status: Optional[OpenEnum[DoubleEncryptionStatus]] = Field(
        None, alias="doubleEncryptionStatus"
    )


class ManagementResourcePreferences(AzureModel):
    preferred_management_resource_id: Optional[str] = Field(
        None, alias="preferredManagementResourceId"
    )


class Preferences(AzureModel):
    notification_preferences: Optional[List[NotificationPreference]] = Field(
        None, alias="notificationPreferences"
    )
    transport_preferences: Optional[TransportPreferences] = Field(
        None, alias="transportPreferences"
    )
    encryption_preferences: Optional[EncryptionPreferences] = Field(
        None, alias="encryptionPreferences"
    )
    management_resource_preferences: Optional[ManagementResourcePreferences] = Field(
        None, alias="managementResourcePreferences"
    )


class ForwardShippingDetails(AzureModel):
    carrier_name: Optional[str] = Field(None, alias="carrierName")
    carrier_display_name: Optional[str] = Field(None, alias="carrierDisplayName")
    tracking_id: Optional[str] = Field(None, alias="trackingId")
    tracking_url: Optional[str] = Field(None, alias="trackingUrl")


class ReverseShippingDetails(AzureModel):
    sas_key_for_label: Optional[str] = Field(None, alias="sasKeyForLabel")
    carrier_name: Optional[str] = Field(None, alias="carrierName")
    carrier_display_name: Optional[str] = Field(None, alias="carrierDisplayName")
    tracking_id: Optional[str] = Field(None, alias="trackingId")
    tracking_url: Optional[str] = Field(None, alias="trackingUrl")


class OrderItemDetails(AzureModel):
    product_details: ProductDetails = Field(alias="productDetails")
    order_item_type: OpenEnum[OrderItemType] = Field(alias="orderItemType")
    current_stage: Optional[StageDetails] = Field(None, alias="currentStage")
    order_item_stage_history: Optional[List[StageDetails]] = Field(
        None, alias="orderItemStageHistory"
    )
    preferences: Optional[Preferences] = None
    forward_shipping_details: Optional[ForwardShippingDetails] = Field(
        None, alias="forwardShippingDetails"
    )
    reverse_shipping_details: Optional[ReverseShippingDetails] = Field(
        None, alias="reverseShippingDetails"
    )
    notification_email_list: Optional[List[str]] = Field(
        None, alias="notificationEmailList"
    )
    cancellation_reason: Optional[str] = Field(None, alias="cancellationReason")
    cancellation_status: Optional[OpenEnum[CancellationStatus]] = Field(
        None, alias="cancellationStatus"
    )
    deletion_status: Optional[OpenEnum[DeletionStatus]] = Field(
        None, alias="deletionStatus"
    )
    return_reason: Optional[str] = Field(None, alias="returnReason")
    return_status: Optional[OpenEnum[ReturnStatus]] = Field(None, alias="returnStatus")
    management_rp_details: Optional[ResourceProviderDetails] = Field(
        None, alias="managementRpDetails"
    )
    management_rp_details_list: Optional[List[ResourceProviderDetails]] = Field(
        None, alias="managementRpDetailsList"
    )
    error: Optional[ErrorDetail] = None


class OrderItemProperties(AzureModel):
    order_item_details: OrderItemDetails = Field(alias="orderItemDetails")
    address_details: AddressDetails = Field(alias="addressDetails")
    start_time: Optional[datetime.datetime] = Field(None, alias="startTime")
    order_id: str = Field(alias="orderId")


class OrderItemResource(AzureModel):
    tracked_resource: TrackedResource = flattened(TrackedResource)
    properties: OrderItemProperties
    system_data: Optional[SystemData] = Field(None, alias="systemData")


class OrderItemResourceList(AzureModel):
    value: Optional[List[OrderItemResource]] = None
    next_link: Optional[str] = Field(None, alias="nextLink")


class OrderItemUpdateProperties(AzureModel):
    forward_address: Optional[AddressProperties] = Field(None, alias="forwardAddress")
    preferences: Optional[Preferences] = None
    notification_email_list: Optional[List[str]] = Field(
        None, alias="notificationEmailList"
    )


class OrderItemUpdateParameter(AzureModel):
    properties: Optional[OrderItemUpdateProperties] = None
    tags: Optional[Dict[str, Any]] = None


class CancellationReason(AzureModel):
    reason: str


class ReturnOrderItemDetails(AzureModel):
    return_address: Optional[AddressProperties] = Field(None, alias="returnAddress")
    return_reason: str = Field(alias="returnReason")
    service_tag: Optional[str] = Field(None, alias="serviceTag")
    shipping_box_required: Optional[bool] = Field(None, alias="shippingBoxRequired")
