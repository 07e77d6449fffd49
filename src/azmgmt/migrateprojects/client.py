from __future__ import annotations

from typing import Optional

from azmgmt.core.client import OperationGroup, ServiceClient
from azmgmt.core.operation import PageableRequestBuilder, RequestBuilder
from azmgmt.core.rest_api import quote_path

from .models import (
    Database,
    DatabaseCollection,
    DatabaseInstance,
    DatabaseInstanceCollection,
    EventCollection,
    Machine,
    MachineCollection,
    MigrateEvent,
    MigrateProject,
    OperationResultList,
    RefreshSummaryInput,
    RefreshSummaryResult,
    RegisterToolInput,
    RegistrationResult,
    Solution,
    SolutionConfig,
    SolutionsCollection,
)

API_VERSION = "2018-09-01-preview"


def _project_path(
    subscription_id: str,
    resource_group_name: str,
    migrate_project_name: str,
    rest: Optional[str] = None,
) -> str:
    path = (
        f"subscriptions/{quote_path(subscription_id)}"
        f"/resourceGroups/{quote_path(resource_group_name)}"
        "/providers/Microsoft.Migrate/migrateProjects"
        f"/{quote_path(migrate_project_name)}"
    )
    if rest is not None:
        path = f"{path}/{rest}"
    return path


class _MigrateProjectOperations(OperationGroup):
    API_VERSION = API_VERSION

    def _enumerate(
        self,
        subscription_id: str,
        resource_group_name: str,
        migrate_project_name: str,
        collection: str,
        page_type: type,
        continuation_token: Optional[str],
        page_size: Optional[int],
        accept_language: Optional[str],
    ) -> PageableRequestBuilder:
        # continuationToken/pageSize only shape the first request, later pages follow
        # nextLink like every other list
        return self._pageable(
            "GET",
            _project_path(
                subscription_id, resource_group_name, migrate_project_name, collection
            ),
            page_type,
            query_parameters={
                "continuationToken": continuation_token,
                "pageSize": page_size,
            },
            headers={"Accept-Language": accept_language},
        )

    def _get(
        self,
        subscription_id: str,
        resource_group_name: str,
        migrate_project_name: str,
        collection: str,
        name: str,
        result_type: type,
        accept_language: Optional[str] = None,
    ) -> RequestBuilder:
        return self._request(
            "GET",
            _project_path(
                subscription_id,
                resource_group_name,
                migrate_project_name,
                f"{collection}/{quote_path(name)}",
            ),
            {200: result_type},
            headers={"Accept-Language": accept_language},
        )


class DatabaseInstancesOperations(_MigrateProjectOperations):
    def enumerate_database_instances(
        self,
        subscription_id: str,
        resource_group_name: str,
        migrate_project_name: str,
        *,
        continuation_token: Optional[str] = None,
        page_size: Optional[int] = None,
        accept_language: Optional[str] = None,
    ) -> PageableRequestBuilder:
        return self._enumerate(
            subscription_id,
            resource_group_name,
            migrate_project_name,
            "databaseInstances",
            DatabaseInstanceCollection,
            continuation_token,
            page_size,
            accept_language,
        )

    def get_database_instance(
        self,
        subscription_id: str,
        resource_group_name: str,
        migrate_project_name: str,
        database_instance_name: str,
        *,
        accept_language: Optional[str] = None,
    ) -> RequestBuilder:
        return self._get(
            subscription_id,
            resource_group_name,
            migrate_project_name,
            "databaseInstances",
            database_instance_name,
            DatabaseInstance,
            accept_language,
        )


class DatabasesOperations(_MigrateProjectOperations):
    def enumerate_databases(
        self,
        subscription_id: str,
        resource_group_name: str,
        migrate_project_name: str,
        *,
        continuation_token: Optional[str] = None,
        page_size: Optional[int] = None,
        accept_language: Optional[str] = None,
    ) -> PageableRequestBuilder:
        return self._enumerate(
            subscription_id,
            resource_group_name,
            migrate_project_name,
            "databases",
            DatabaseCollection,
            continuation_token,
            page_size,
            accept_language,
        )

    def get_database(
        self,
        subscription_id: str,
        resource_group_name: str,
        migrate_project_name: str,
        database_name: str,
        *,
        accept_language: Optional[str] = None,
    ) -> RequestBuilder:
        return self._get(
            subscription_id,
            resource_group_name,
            migrate_project_name,
            "databases",
            database_name,
            Database,
            accept_language,
        )


class EventsOperations(_MigrateProjectOperations):
    def enumerate_events(
        self,
        subscription_id: str,
        resource_group_name: str,
        migrate_project_name: str,
        *,
        continuation_token: Optional[str] = None,
        page_size: Optional[int] = None,
        accept_language: Optional[str] = None,
    ) -> PageableRequestBuilder:
        return self._enumerate(
            subscription_id,
            resource_group_name,
            migrate_project_name,
            "migrateEvents",
            EventCollection,
            continuation_token,
            page_size,
            accept_language,
        )

    def get_event(
        self,
        subscription_id: str,
        resource_group_name: str,
        migrate_project_name: str,
        event_name: str,
    ) -> RequestBuilder:
        return self._get(
            subscription_id,
            resource_group_name,
            migrate_project_name,
            "migrateEvents",
            event_name,
            MigrateEvent,
        )

    def delete_event(
        self,
        subscription_id: str,
        resource_group_name: str,
        migrate_project_name: str,
        event_name: str,
    ) -> RequestBuilder:
        return self._request(
            "DELETE",
            _project_path(
                subscription_id,
                resource_group_name,
                migrate_project_name,
                f"migrateEvents/{quote_path(event_name)}",
            ),
            {200: None, 204: None},
        )


class MachinesOperations(_MigrateProjectOperations):
    def enumerate_machines(
        self,
        subscription_id: str,
        resource_group_name: str,
        migrate_project_name: str,
        *,
        continuation_token: Optional[str] = None,
        page_size: Optional[int] = None,
    ) -> PageableRequestBuilder:
        return self._enumerate(
            subscription_id,
            resource_group_name,
            migrate_project_name,
            "machines",
            MachineCollection,
            continuation_token,
            page_size,
            None,
        )

    def get_machine(
        self,
        subscription_id: str,
        resource_group_name: str,
        migrate_project_name: str,
        machine_name: str,
    ) -> RequestBuilder:
        return self._get(
            subscription_id,
            resource_group_name,
            migrate_project_name,
            "machines",
            machine_name,
            Machine,
        )


class MigrateProjectsOperations(_MigrateProjectOperations):
    def get_migrate_project(
        self, subscription_id: str, resource_group_name: str, migrate_project_name: str
    ) -> RequestBuilder:
        return self._request(
            "GET",
            _project_path(subscription_id, resource_group_name, migrate_project_name),
            {200: MigrateProject},
        )

    def put_migrate_project(
        self,
        subscription_id: str,
        resource_group_name: str,
        migrate_project_name: str,
        body: MigrateProject,
        *,
        accept_language: Optional[str] = None,
    ) -> RequestBuilder:
        return self._request(
            "PUT",
            _project_path(subscription_id, resource_group_name, migrate_project_name),
            {200: MigrateProject, 201: MigrateProject},
            headers={"Accept-Language": accept_language},
            body=body,
        )

    def patch_migrate_project(
        self,
        subscription_id: str,
        resource_group_name: str,
        migrate_project_name: str,
        body: MigrateProject,
        *,
        accept_language: Optional[str] = None,
    ) -> RequestBuilder:
        return self._request(
            "PATCH",
            _project_path(subscription_id, resource_group_name, migrate_project_name),
            {200: MigrateProject},
            headers={"Accept-Language": accept_language},
            body=body,
        )

    def delete_migrate_project(
        self,
        subscription_id: str,
        resource_group_name: str,
        migrate_project_name: str,
        *,
        accept_language: Optional[str] = None,
    ) -> RequestBuilder:
        return self._request(
            "DELETE",
            _project_path(subscription_id, resource_group_name, migrate_project_name),
            {200: None, 204: None},
            headers={"Accept-Language": accept_language},
        )

    def register_tool(
        self,
        subscription_id: str,
        resource_group_name: str,
        migrate_project_name: str,
        input: RegisterToolInput,
        *,
        accept_language: Optional[str] = None,
    ) -> RequestBuilder:
        return self._request(
            "POST",
            _project_path(
                subscription_id,
                resource_group_name,
                migrate_project_name,
                "registerTool",
            ),
            {200: RegistrationResult},
            headers={"Accept-Language": accept_language},
            body=input,
        )

    def refresh_migrate_project_summary(
        self,
        subscription_id: str,
        resource_group_name: str,
        migrate_project_name: str,
        input: RefreshSummaryInput,
    ) -> RequestBuilder:
        return self._request(
            "POST",
            _project_path(
                subscription_id,
                resource_group_name,
                migrate_project_name,
                "refreshSummary",
            ),
            {200: RefreshSummaryResult},
            body=input,
        )


class SolutionsOperations(_MigrateProjectOperations):
    def _solution_path(
        self,
        subscription_id: str,
        resource_group_name: str,
        migrate_project_name: str,
        solution_name: str,
        action: Optional[str] = None,
    ) -> str:
        rest = f"solutions/{quote_path(solution_name)}"
        if action is not None:
            rest = f"{rest}/{action}"
        return _project_path(
            subscription_id, resource_group_name, migrate_project_name, rest
        )

    def get_solution(
        self,
        subscription_id: str,
        resource_group_name: str,
        migrate_project_name: str,
        solution_name: str,
    ) -> RequestBuilder:
        return self._request(
            "GET",
            self._solution_path(
                subscription_id,
                resource_group_name,
                migrate_project_name,
                solution_name,
            ),
            {200: Solution},
        )

    def put_solution(
        self,
        subscription_id: str,
        resource_group_name: str,
        migrate_project_name: str,
        solution_name: str,
        solution_input: Solution,
    ) -> RequestBuilder:
        return self._request(
            "PUT",
            self._solution_path(
                subscription_id,
                resource_group_name,
                migrate_project_name,
                solution_name,
            ),
            {200: Solution, 201: Solution},
            body=solution_input,
        )

    def patch_solution(
        self,
        subscription_id: str,
        resource_group_name: str,
        migrate_project_name: str,
        solution_name: str,
        solution_input: Solution,
    ) -> RequestBuilder:
        return self._request(
            "PATCH",
            self._solution_path(
                subscription_id,
                resource_group_name,
                migrate_project_name,
                solution_name,
            ),
            {200: Solution},
            body=solution_input,
        )

    def delete_solution(
        self,
        subscription_id: str,
        resource_group_name: str,
        migrate_project_name: str,
        solution_name: str,
        *,
        accept_language: Optional[str] = None,
    ) -> RequestBuilder:
        return self._request(
            "DELETE",
            self._solution_path(
                subscription_id,
                resource_group_name,
                migrate_project_name,
                solution_name,
            ),
            {200: None, 204: None},
            headers={"Accept-Language": accept_language},
        )

    def enumerate_solutions(
        self, subscription_id: str, resource_group_name: str, migrate_project_name: str
    ) -> PageableRequestBuilder:
        return self._pageable(
            "GET",
            _project_path(
                subscription_id, resource_group_name, migrate_project_name, "solutions"
            ),
            SolutionsCollection,
        )

    def get_config(
        self,
        subscription_id: str,
        resource_group_name: str,
        migrate_project_name: str,
        solution_name: str,
    ) -> RequestBuilder:
        return self._request(
            "POST",
            self._solution_path(
                subscription_id,
                resource_group_name,
                migrate_project_name,
                solution_name,
                "getConfig",
            ),
            {200: SolutionConfig},
            headers={"Content-Length": "0"},
        )

    def cleanup_solution_data(
        self,
        subscription_id: str,
        resource_group_name: str,
        migrate_project_name: str,
        solution_name: str,
    ) -> RequestBuilder:
        return self._request(
            "POST",
            self._solution_path(
                subscription_id,
                resource_group_name,
                migrate_project_name,
                solution_name,
                "cleanupData",
            ),
            {200: None},
            headers={"Content-Length": "0"},
        )


class OperationsOperations(OperationGroup):
    API_VERSION = API_VERSION

    def list(self) -> RequestBuilder:
        # the result has no nextLink, so this is a single request
        return self._request(
            "GET", "providers/Microsoft.Migrate/operations", {200: OperationResultList}
        )


class MigrateProjectsClient(ServiceClient):
    """
    Azure Migrate projects, the solutions (tools) registered with them, and the
    machines, databases and events those solutions report
    """

    API_VERSION = API_VERSION

    def database_instances(self) -> DatabaseInstancesOperations:
        return DatabaseInstancesOperations(self.config)

    def databases(self) -> DatabasesOperations:
        return DatabasesOperations(self.config)

    def events(self) -> EventsOperations:
        return EventsOperations(self.config)

    def machines(self) -> MachinesOperations:
        return MachinesOperations(self.config)

    def migrate_projects(self) -> MigrateProjectsOperations:
        return MigrateProjectsOperations(self.config)

    def operations(self) -> OperationsOperations:
        return OperationsOperations(self.config)

    def solutions(self) -> SolutionsOperations:
        return SolutionsOperations(self.config)
