"""The management resource facade.

One facade instance serves one request for one entity kind. It resolves
tokens, delegates to the management service, and marshals whatever comes
back. Nothing is cached between requests.
"""

from __future__ import annotations

from contextlib import contextmanager
from typing import Callable, Generic, Iterator, Optional, TypeVar

from assethub.core.metrics import record_management_operation
from assethub.domain.context import TenantRequestContext
from assethub.domain.exceptions import ConflictError, DomainError, NotFoundError, ValidationError
from assethub.domain.labels import Label, LabelTarget
from assethub.domain.search import SearchCriteria, SearchResults
from assethub.services.base import ManagementService
from assethub.services.label_generation import LabelGenerationService
from assethub.services.marshal import MarshalHelper

TModel = TypeVar("TModel")
TView = TypeVar("TView")

MarshalFactory = Callable[[TenantRequestContext, bool], MarshalHelper]


def _outcome(exc: DomainError) -> str:
    if isinstance(exc, NotFoundError):
        return "not_found"
    if isinstance(exc, ConflictError):
        return "conflict"
    if isinstance(exc, ValidationError):
        return "invalid"
    return "error"


class ResourceFacade(Generic[TModel, TView]):
    """CRUD, search and labels for one management entity kind."""

    def __init__(
        self,
        service: ManagementService[TModel],
        marshal_factory: MarshalFactory,
        labels: Optional[LabelGenerationService] = None,
        label_target: Optional[LabelTarget] = None,
    ) -> None:
        self.service = service
        self.marshal_factory = marshal_factory
        self.labels = labels
        self.label_target = label_target

    @property
    def entity_name(self) -> str:
        return self.service.entity_name

    def assure(self, token: str, context: TenantRequestContext) -> TModel:
        """Resolve a token or raise the kind's NotFoundError."""
        return self.service.require_by_token(token, context)

    def create(self, payload, context: TenantRequestContext) -> TView:
        with self._track("create"):
            entity = self.service.create(payload, context)
            return self._helper(context).convert(entity)

    def current(self, token: str, context: TenantRequestContext) -> TView:
        """Marshalled state of an entity, not counted as an operation."""
        return self._helper(context).convert(self.assure(token, context))

    def get_detail(self, token: str, context: TenantRequestContext) -> TView:
        with self._track("get"):
            entity = self.assure(token, context)
            return self._helper(context).convert(entity)

    def update(self, token: str, payload, context: TenantRequestContext) -> TView:
        with self._track("update"):
            existing = self.assure(token, context)
            entity = self.service.update(existing.id, payload, context)
            return self._helper(context).convert(entity)

    def delete(self, token: str, context: TenantRequestContext) -> TView:
        """Delete by token and return the entity as it was just before deletion."""
        with self._track("delete"):
            existing = self.assure(token, context)
            view = self._helper(context).convert(existing)
            self.service.delete(existing.id, context)
            return view

    def search(
        self,
        criteria: SearchCriteria,
        context: TenantRequestContext,
        include_related: bool = False,
    ) -> SearchResults[TView]:
        with self._track("list"):
            matches = self.service.search(criteria, context)
            helper = self.marshal_factory(context, include_related)
            return matches.map(helper.convert)

    def get_label(
        self,
        token: str,
        generator_id: str,
        context: TenantRequestContext,
    ) -> Optional[Label]:
        """Render a label; None means the generator produced nothing."""
        if self.labels is None or self.label_target is None:
            raise ValidationError(f"Labels are not available for {self.entity_name}")
        with self._track("label"):
            existing = self.assure(token, context)
            return self.labels.get_label(generator_id, self.label_target, existing.id, context)

    def _helper(self, context: TenantRequestContext) -> MarshalHelper:
        # Single-entity responses always embed related entities
        return self.marshal_factory(context, True)

    @contextmanager
    def _track(self, operation: str) -> Iterator[None]:
        try:
            yield
        except DomainError as exc:
            record_management_operation(self.entity_name, operation, _outcome(exc))
            raise
        record_management_operation(self.entity_name, operation)
