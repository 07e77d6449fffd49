from __future__ import annotations

from typing import List, Optional

from azmgmt.core.client import OperationGroup, ServiceClient
from azmgmt.core.operation import PageableRequestBuilder, RequestBuilder
from azmgmt.core.rest_api import quote_path

from .models import (
    AppliedReservations,
    AvailableScopeProperties,
    AvailableScopeRequest,
    CalculateExchangeOperationResultResponse,
    CalculateExchangeRequest,
    CalculatePriceResponse,
    CatalogsResult,
    ChangeDirectoryRequest,
    ChangeDirectoryResponse,
    CurrentQuotaLimitBase,
    ExchangeOperationResultResponse,
    ExchangeRequest,
    MergeRequest,
    OperationList,
    Patch,
    PurchaseRequest,
    QuotaLimits,
    QuotaRequestDetails,
    QuotaRequestDetailsList,
    QuotaRequestSubmitResponse201,
    ReservationList,
    ReservationOrderList,
    ReservationOrderResponse,
    ReservationResponse,
    ReservationsListResult,
    SplitRequest,
)

API_VERSION = "2022-11-01"
# quota operations are versioned separately
QUOTA_API_VERSION = "2020-10-25"

_CAPACITY = "providers/Microsoft.Capacity"


def _reservation_order_path(
    reservation_order_id: str, rest: Optional[str] = None
) -> str:
    path = f"{_CAPACITY}/reservationOrders/{quote_path(reservation_order_id)}"
    if rest is not None:
        path = f"{path}/{rest}"
    return path


def _quota_path(
    subscription_id: str, provider_id: str, location: str, collection: str
) -> str:
    return (
        f"subscriptions/{quote_path(subscription_id)}/{_CAPACITY}"
        f"/resourceProviders/{quote_path(provider_id)}"
        f"/locations/{quote_path(location)}/{collection}"
    )


class ReservationOperations(OperationGroup):
    API_VERSION = API_VERSION

    def available_scopes(
        self,
        reservation_order_id: str,
        reservation_id: str,
        body: AvailableScopeRequest,
    ) -> RequestBuilder:
        return self._request(
            "POST",
            _reservation_order_path(
                reservation_order_id,
                f"reservations/{quote_path(reservation_id)}/availableScopes",
            ),
            {200: AvailableScopeProperties},
            body=body,
        )

    def split(self, reservation_order_id: str, body: SplitRequest) -> RequestBuilder:
        return self._request(
            "POST",
            _reservation_order_path(reservation_order_id, "split"),
            {200: List[ReservationResponse], 202: None},
            body=body,
        )

    def merge(self, reservation_order_id: str, body: MergeRequest) -> RequestBuilder:
        return self._request(
            "POST",
            _reservation_order_path(reservation_order_id, "merge"),
            {200: List[ReservationResponse], 202: None},
            body=body,
        )

    def list(self, reservation_order_id: str) -> PageableRequestBuilder:
        return self._pageable(
            "GET",
            _reservation_order_path(reservation_order_id, "reservations"),
            ReservationList,
        )

    def get(
        self,
        reservation_id: str,
        reservation_order_id: str,
        *,
        expand: Optional[str] = None,
    ) -> RequestBuilder:
        return self._request(
            "GET",
            _reservation_order_path(
                reservation_order_id, f"reservations/{quote_path(reservation_id)}"
            ),
            {200: ReservationResponse},
            query_parameters={"expand": expand},
        )

    def update(
        self, reservation_order_id: str, reservation_id: str, parameters: Patch
    ) -> RequestBuilder:
        return self._request(
            "PATCH",
            _reservation_order_path(
                reservation_order_id, f"reservations/{quote_path(reservation_id)}"
            ),
            {200: ReservationResponse, 202: None},
            body=parameters,
        )

    def list_revisions(
        self, reservation_id: str, reservation_order_id: str
    ) -> PageableRequestBuilder:
        return self._pageable(
            "GET",
            _reservation_order_path(
                reservation_order_id,
                f"reservations/{quote_path(reservation_id)}/revisions",
            ),
            ReservationList,
        )

    def list_all(
        self,
        *,
        filter: Optional[str] = None,
        orderby: Optional[str] = None,
        refresh_summary: Optional[str] = None,
        skiptoken: Optional[float] = None,
        selected_state: Optional[str] = None,
        take: Optional[float] = None,
    ) -> PageableRequestBuilder:
        return self._pageable(
            "GET",
            f"{_CAPACITY}/reservations",
            ReservationsListResult,
            query_parameters={
                "$filter": filter,
                "$orderby": orderby,
                "refreshSummary": refresh_summary,
                "$skiptoken": skiptoken,
                "selectedState": selected_state,
                "take": take,
            },
        )

    def get_catalog(
        self,
        subscription_id: str,
        *,
        reserved_resource_type: Optional[str] = None,
        location: Optional[str] = None,
        publisher_id: Optional[str] = None,
        offer_id: Optional[str] = None,
        plan_id: Optional[str] = None,
        filter: Optional[str] = None,
        skip: Optional[float] = None,
        take: Optional[float] = None,
    ) -> PageableRequestBuilder:
        return self._pageable(
            "GET",
            f"subscriptions/{quote_path(subscription_id)}/{_CAPACITY}/catalogs",
            CatalogsResult,
            query_parameters={
                "reservedResourceType": reserved_resource_type,
                "location": location,
                "publisherId": publisher_id,
                "offerId": offer_id,
                "planId": plan_id,
                "$filter": filter,
                "$skip": skip,
                "$take": take,
            },
        )

    def get_applied_reservation_list(self, subscription_id: str) -> RequestBuilder:
        return self._request(
            "GET",
            f"subscriptions/{quote_path(subscription_id)}/{_CAPACITY}"
            "/appliedReservations",
            {200: AppliedReservations},
        )


class ReservationOrderOperations(OperationGroup):
    API_VERSION = API_VERSION

    def calculate(self, body: PurchaseRequest) -> RequestBuilder:
        return self._request(
            "POST",
            f"{_CAPACITY}/calculatePrice",
            {200: CalculatePriceResponse},
            body=body,
        )

    def list(self) -> PageableRequestBuilder:
        return self._pageable(
            "GET", f"{_CAPACITY}/reservationOrders", ReservationOrderList
        )

    def get(
        self, reservation_order_id: str, *, expand: Optional[str] = None
    ) -> RequestBuilder:
        return self._request(
            "GET",
            _reservation_order_path(reservation_order_id),
            {200: ReservationOrderResponse},
            query_parameters={"$expand": expand},
        )

    def purchase(
        self, reservation_order_id: str, body: PurchaseRequest
    ) -> RequestBuilder:
        return self._request(
            "PUT",
            _reservation_order_path(reservation_order_id),
            {200: ReservationOrderResponse, 202: None},
            body=body,
        )

    def change_directory(
        self, reservation_order_id: str, body: ChangeDirectoryRequest
    ) -> RequestBuilder:
        return self._request(
            "POST",
            _reservation_order_path(reservation_order_id, "changeDirectory"),
            {200: ChangeDirectoryResponse},
            body=body,
        )


class OperationOperations(OperationGroup):
    API_VERSION = API_VERSION

    def list(self) -> PageableRequestBuilder:
        return self._pageable("GET", f"{_CAPACITY}/operations", OperationList)


class CalculateExchangeOperations(OperationGroup):
    API_VERSION = API_VERSION

    def post(self, body: CalculateExchangeRequest) -> RequestBuilder:
        return self._request(
            "POST",
            f"{_CAPACITY}/calculateExchange",
            {200: CalculateExchangeOperationResultResponse, 202: None},
            body=body,
        )


class ExchangeOperations(OperationGroup):
    API_VERSION = API_VERSION

    def post(self, body: ExchangeRequest) -> RequestBuilder:
        return self._request(
            "POST",
            f"{_CAPACITY}/exchange",
            {200: ExchangeOperationResultResponse, 202: None},
            body=body,
        )


class QuotaOperations(OperationGroup):
    API_VERSION = QUOTA_API_VERSION

    def get(
        self, subscription_id: str, provider_id: str, location: str, resource_name: str
    ) -> RequestBuilder:
        return self._request(
            "GET",
            _quota_path(
                subscription_id,
                provider_id,
                location,
                f"serviceLimits/{quote_path(resource_name)}",
            ),
            {200: CurrentQuotaLimitBase},
        )

    def create_or_update(
        self,
        subscription_id: str,
        provider_id: str,
        location: str,
        resource_name: str,
        create_quota_request: CurrentQuotaLimitBase,
    ) -> RequestBuilder:
        return self._request(
            "PUT",
            _quota_path(
                subscription_id,
                provider_id,
                location,
                f"serviceLimits/{quote_path(resource_name)}",
            ),
            {200: CurrentQuotaLimitBase, 201: QuotaRequestSubmitResponse201},
            body=create_quota_request,
        )

    def update(
        self,
        subscription_id: str,
        provider_id: str,
        location: str,
        resource_name: str,
        create_quota_request: CurrentQuotaLimitBase,
    ) -> RequestBuilder:
        return self._request(
            "PATCH",
            _quota_path(
                subscription_id,
                provider_id,
                location,
                f"serviceLimits/{quote_path(resource_name)}",
            ),
            {200: CurrentQuotaLimitBase, 201: QuotaRequestSubmitResponse201},
            body=create_quota_request,
        )

    def list(
        self, subscription_id: str, provider_id: str, location: str
    ) -> PageableRequestBuilder:
        return self._pageable(
            "GET",
            _quota_path(subscription_id, provider_id, location, "serviceLimits"),
            QuotaLimits,
        )


class QuotaRequestStatusOperations(OperationGroup):
    API_VERSION = QUOTA_API_VERSION

    def get(
        self, subscription_id: str, provider_id: str, location: str, id: str
    ) -> RequestBuilder:
        return self._request(
            "GET",
            _quota_path(
                subscription_id,
                provider_id,
                location,
                f"serviceLimitsRequests/{quote_path(id)}",
            ),
            {200: QuotaRequestDetails},
        )

    def list(
        self,
        subscription_id: str,
        provider_id: str,
        location: str,
        *,
        filter: Optional[str] = None,
        top: Optional[int] = None,
        skiptoken: Optional[str] = None,
    ) -> PageableRequestBuilder:
        return self._pageable(
            "GET",
            _quota_path(
                subscription_id, provider_id, location, "serviceLimitsRequests"
            ),
            QuotaRequestDetailsList,
            query_parameters={"$filter": filter, "$top": top, "$skiptoken": skiptoken},
        )


class ReservationsClient(ServiceClient):
    """
    Reservations (prepaid capacity) and the orders that contain them, exchanges, the
    catalog of what can be reserved, and compute quotas.
    """

    API_VERSION = API_VERSION

    def reservation(self) -> ReservationOperations:
        return ReservationOperations(self.config)

    def reservation_order(self) -> ReservationOrderOperations:
        return ReservationOrderOperations(self.config)

    def operation(self) -> OperationOperations:
        return OperationOperations(self.config)

    def calculate_exchange(self) -> CalculateExchangeOperations:
        return CalculateExchangeOperations(self.config)

    def exchange(self) -> ExchangeOperations:
        return ExchangeOperations(self.config)

    def quota(self) -> QuotaOperations:
        return QuotaOperations(self.config)

    def quota_request_status(self) -> QuotaRequestStatusOperations:
        return QuotaRequestStatusOperations(self.config)
