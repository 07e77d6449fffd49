from __future__ import annotations

from typing import Optional

from azmgmt.core.client import ServiceClient
from azmgmt.core.models import OperationListResult
from azmgmt.core.operation import PageableRequestBuilder, RequestBuilder
from azmgmt.core.rest_api import quote_path

from .models import (
    AddressResource,
    AddressResourceList,
    AddressUpdateParameter,
    CancellationReason,
    Configurations,
    ConfigurationsRequest,
    OrderItemResource,
    OrderItemResourceList,
    OrderItemUpdateParameter,
    OrderResource,
    OrderResourceList,
    ProductFamilies,
    ProductFamiliesMetadata,
    ProductFamiliesRequest,
    ReturnOrderItemDetails,
)

_PROVIDER = "providers/Microsoft.EdgeOrder"


def _subscription_path(subscription_id: str, rest: str) -> str:
    return f"subscriptions/{quote_path(subscription_id)}/{_PROVIDER}/{rest}"


def _resource_group_path(subscription_id: str, resource_group: str, rest: str) -> str:
    return (
        f"subscriptions/{quote_path(subscription_id)}"
        f"/resourceGroups/{quote_path(resource_group)}/{_PROVIDER}/{rest}"
    )


class EdgeOrderClient(ServiceClient):
    """
    Addresses, orders and order items for Azure Edge hardware, plus the product catalog.
    Unlike the other clients, every operation is a method directly on the client.
    """

    API_VERSION = "2021-12-01"

    def list_operations(self) -> PageableRequestBuilder:
        return self._pageable("GET", f"{_PROVIDER}/operations", OperationListResult)

    # subscription level

    def list_addresses_at_subscription_level(
        self,
        subscription_id: str,
        *,
        filter: Optional[str] = None,
        skip_token: Optional[str] = None,
    ) -> PageableRequestBuilder:
        return self._pageable(
            "GET",
            _subscription_path(subscription_id, "addresses"),
            AddressResourceList,
            query_parameters={"$filter": filter, "$skipToken": skip_token},
        )

    def list_product_families(
        self,
        subscription_id: str,
        product_families_request: ProductFamiliesRequest,
        *,
        expand: Optional[str] = None,
        skip_token: Optional[str] = None,
    ) -> PageableRequestBuilder:
        return self._pageable(
            "POST",
            _subscription_path(subscription_id, "listProductFamilies"),
            ProductFamilies,
            query_parameters={"$expand": expand, "$skipToken": skip_token},
            body=product_families_request,
        )

    def list_configurations(
        self,
        subscription_id: str,
        configurations_request: ConfigurationsRequest,
        *,
        skip_token: Optional[str] = None,
    ) -> PageableRequestBuilder:
        return self._pageable(
            "POST",
            _subscription_path(subscription_id, "listConfigurations"),
            Configurations,
            query_parameters={"$skipToken": skip_token},
            body=configurations_request,
        )

    def list_product_families_metadata(
        self, subscription_id: str, *, skip_token: Optional[str] = None
    ) -> PageableRequestBuilder:
        # a POST with no body
        return self._pageable(
            "POST",
            _subscription_path(subscription_id, "productFamiliesMetadata"),
            ProductFamiliesMetadata,
            query_parameters={"$skipToken": skip_token},
            headers={"Content-Length": "0"},
        )

    def list_order_at_subscription_level(
        self, subscription_id: str, *, skip_token: Optional[str] = None
    ) -> PageableRequestBuilder:
        return self._pageable(
            "GET",
            _subscription_path(subscription_id, "orders"),
            OrderResourceList,
            query_parameters={"$skipToken": skip_token},
        )

    def list_order_items_at_subscription_level(
        self,
        subscription_id: str,
        *,
        filter: Optional[str] = None,
        expand: Optional[str] = None,
        skip_token: Optional[str] = None,
    ) -> PageableRequestBuilder:
        return self._pageable(
            "GET",
            _subscription_path(subscription_id, "orderItems"),
            OrderItemResourceList,
            query_parameters={
                "$filter": filter,
                "$expand": expand,
                "$skipToken": skip_token,
            },
        )

    # addresses

    def list_addresses_at_resource_group_level(
        self,
        subscription_id: str,
        resource_group_name: str,
        *,
        filter: Optional[str] = None,
        skip_token: Optional[str] = None,
    ) -> PageableRequestBuilder:
        return self._pageable(
            "GET",
            _resource_group_path(subscription_id, resource_group_name, "addresses"),
            AddressResourceList,
            query_parameters={"$filter": filter, "$skipToken": skip_token},
        )

    def _address_path(
        self, subscription_id: str, resource_group_name: str, address_name: str
    ) -> str:
        return _resource_group_path(
            subscription_id,
            resource_group_name,
            f"addresses/{quote_path(address_name)}",
        )

    def get_address_by_name(
        self, address_name: str, subscription_id: str, resource_group_name: str
    ) -> RequestBuilder:
        return self._request(
            "GET",
            self._address_path(subscription_id, resource_group_name, address_name),
            {200: AddressResource},
        )

    def create_address(
        self,
        address_name: str,
        subscription_id: str,
        resource_group_name: str,
        address_resource: AddressResource,
    ) -> RequestBuilder:
        return self._request(
            "PUT",
            self._address_path(subscription_id, resource_group_name, address_name),
            {200: AddressResource, 202: None},
            body=address_resource,
        )

    def update_address(
        self,
        address_name: str,
        subscription_id: str,
        resource_group_name: str,
        address_update_parameter: AddressUpdateParameter,
        *,
        if_match: Optional[str] = None,
    ) -> RequestBuilder:
        return self._request(
            "PATCH",
            self._address_path(subscription_id, resource_group_name, address_name),
            {200: AddressResource, 202: None},
            headers={"If-Match": if_match},
            body=address_update_parameter,
        )

    def delete_address_by_name(
        self, address_name: str, subscription_id: str, resource_group_name: str
    ) -> RequestBuilder:
        return self._request(
            "DELETE",
            self._address_path(subscription_id, resource_group_name, address_name),
            {200: None, 202: None, 204: None},
        )

    # orders

    def list_order_at_resource_group_level(
        self,
        subscription_id: str,
        resource_group_name: str,
        *,
        skip_token: Optional[str] = None,
    ) -> PageableRequestBuilder:
        return self._pageable(
            "GET",
            _resource_group_path(subscription_id, resource_group_name, "orders"),
            OrderResourceList,
            query_parameters={"$skipToken": skip_token},
        )

    def get_order_by_name(
        self,
        order_name: str,
        subscription_id: str,
        resource_group_name: str,
        location: str,
    ) -> RequestBuilder:
        return self._request(
            "GET",
            _resource_group_path(
                subscription_id,
                resource_group_name,
                f"locations/{quote_path(location)}/orders/{quote_path(order_name)}",
            ),
            {200: OrderResource},
        )

    # order items

    def list_order_items_at_resource_group_level(
        self,
        subscription_id: str,
        resource_group_name: str,
        *,
        filter: Optional[str] = None,
        expand: Optional[str] = None,
        skip_token: Optional[str] = None,
    ) -> PageableRequestBuilder:
        return self._pageable(
            "GET",
            _resource_group_path(subscription_id, resource_group_name, "orderItems"),
            OrderItemResourceList,
            query_parameters={
                "$filter": filter,
                "$expand": expand,
                "$skipToken": skip_token,
            },
        )

    def _order_item_path(
        self,
        subscription_id: str,
        resource_group_name: str,
        order_item_name: str,
        action: Optional[str] = None,
    ) -> str:
        path = _resource_group_path(
            subscription_id,
            resource_group_name,
            f"orderItems/{quote_path(order_item_name)}",
        )
        if action is not None:
            path = f"{path}/{action}"
        return path

    def get_order_item_by_name(
        self,
        order_item_name: str,
        subscription_id: str,
        resource_group_name: str,
        *,
        expand: Optional[str] = None,
    ) -> RequestBuilder:
        return self._request(
            "GET",
            self._order_item_path(
                subscription_id, resource_group_name, order_item_name
            ),
            {200: OrderItemResource},
            query_parameters={"$expand": expand},
        )

    def create_order_item(
        self,
        order_item_name: str,
        subscription_id: str,
        resource_group_name: str,
        order_item_resource: OrderItemResource,
    ) -> RequestBuilder:
        return self._request(
            "PUT",
            self._order_item_path(
                subscription_id, resource_group_name, order_item_name
            ),
            {200: OrderItemResource, 202: None},
            body=order_item_resource,
        )

    def update_order_item(
        self,
        order_item_name: str,
        subscription_id: str,
        resource_group_name: str,
        order_item_update_parameter: OrderItemUpdateParameter,
        *,
        if_match: Optional[str] = None,
    ) -> RequestBuilder:
        return self._request(
            "PATCH",
            self._order_item_path(
                subscription_id, resource_group_name, order_item_name
            ),
            {200: OrderItemResource, 202: None},
            headers={"If-Match": if_match},
            body=order_item_update_parameter,
        )

    def delete_order_item_by_name(
        self, order_item_name: str, subscription_id: str, resource_group_name: str
    ) -> RequestBuilder:
        return self._request(
            "DELETE",
            self._order_item_path(
                subscription_id, resource_group_name, order_item_name
            ),
            {200: None, 202: None, 204: None},
        )

    def cancel_order_item(
        self,
        order_item_name: str,
        subscription_id: str,
        resource_group_name: str,
        cancellation_reason: CancellationReason,
    ) -> RequestBuilder:
        return self._request(
            "POST",
            self._order_item_path(
                subscription_id, resource_group_name, order_item_name, "cancel"
            ),
            {200: None, 204: None},
            body=cancellation_reason,
        )

    def return_order_item(
        self,
        order_item_name: str,
        subscription_id: str,
        resource_group_name: str,
        return_order_item_details: ReturnOrderItemDetails,
    ) -> RequestBuilder:
        return self._request(
            "POST",
            self._order_item_path(
                subscription_id, resource_group_name, order_item_name, "return"
            ),
            {200: None, 202: None},
            body=return_order_item_details,
        )
