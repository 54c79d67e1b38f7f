"""Shared lifecycle logic for tenant-scoped management entities."""

from __future__ import annotations

import uuid
from typing import Any, Dict, Generic, Optional, TypeVar

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from assethub.core.logging import get_logger
from assethub.domain.context import TenantRequestContext
from assethub.domain.exceptions import ConflictError, ErrorCode, NotFoundError
from assethub.domain.search import SearchCriteria, SearchResults
from assethub.repositories.base import TenantScopedRepository

TModel = TypeVar("TModel")

logger = get_logger(__name__)


class ManagementService(Generic[TModel]):
    """Create / update / delete / lookup / search for one entity kind.

    Subclasses provide the repository and translate request payloads into
    column values in ``_resolve_references``.
    """

    entity_name: str = "entity"
    display_name: str = "Entity"
    not_found_code: ErrorCode = ErrorCode.GENERIC

    def __init__(self, session: Session, repository: TenantScopedRepository) -> None:
        self.session = session
        self.repository = repository

    # -------------------------------------------------------------------------
    # Queries

    def get_by_token(self, token: str, context: TenantRequestContext) -> Optional[TModel]:
        return self.repository.get_by_token(token, context.tenant_id)

    def get_by_id(self, entity_id: uuid.UUID, context: TenantRequestContext) -> Optional[TModel]:
        return self.repository.get_by_id(entity_id, context.tenant_id)

    def require_by_token(self, token: str, context: TenantRequestContext) -> TModel:
        entity = self.get_by_token(token, context)
        if entity is None:
            raise self.not_found(token)
        return entity

    def search(
        self,
        criteria: SearchCriteria,
        context: TenantRequestContext,
    ) -> SearchResults[TModel]:
        total, records = self.repository.search(context.tenant_id, criteria)
        return SearchResults(results=list(records), num_results=total)

    def not_found(self, token: str) -> NotFoundError:
        return NotFoundError(f"{self.display_name} '{token}' not found", code=self.not_found_code)

    # -------------------------------------------------------------------------
    # Mutations

    def create(self, payload, context: TenantRequestContext) -> TModel:
        data = payload.model_dump(mode="json")
        token = data.pop("token", None) or str(uuid.uuid4())
        self._ensure_token_unique(token, context)

        values = self._resolve_references(data, context)
        entity = self.repository.model(**values, token=token, tenant_id=context.tenant_id)

        self.repository.add(entity)
        self._commit(token)
        self.repository.refresh(entity)
        logger.info(
            "Created %s",
            self.entity_name,
            extra={"tenant": context.tenant_token, "token": token},
        )
        return entity

    def update(self, entity_id: uuid.UUID, payload, context: TenantRequestContext) -> TModel:
        entity = self._require_by_id(entity_id, context)
        data = payload.model_dump(mode="json", exclude_unset=True)
        values = self._resolve_references(data, context)

        for key, value in values.items():
            setattr(entity, key, value)

        self._commit(entity.token)
        self.repository.refresh(entity)
        return entity

    def delete(self, entity_id: uuid.UUID, context: TenantRequestContext) -> None:
        entity = self._require_by_id(entity_id, context)
        self._ensure_deletable(entity)
        token = entity.token
        self.repository.remove(entity)
        self.repository.commit()
        logger.info(
            "Deleted %s",
            self.entity_name,
            extra={"tenant": context.tenant_token, "token": token},
        )

    # -------------------------------------------------------------------------
    # Hooks and helpers

    def _resolve_references(
        self,
        data: Dict[str, Any],
        context: TenantRequestContext,
    ) -> Dict[str, Any]:
        """Turn payload fields into model attributes; resolve referenced tokens."""
        if "metadata" in data:
            data["metadata_"] = data.pop("metadata")
        return data

    def _ensure_deletable(self, entity: TModel) -> None:
        return None

    def _require_by_id(self, entity_id: uuid.UUID, context: TenantRequestContext) -> TModel:
        entity = self.get_by_id(entity_id, context)
        if entity is None:
            raise self.not_found(str(entity_id))
        return entity

    def _ensure_token_unique(self, token: str, context: TenantRequestContext) -> None:
        if self.repository.get_by_token(token, context.tenant_id):
            raise self._duplicate(token)

    def _duplicate(self, token: str) -> ConflictError:
        return ConflictError(
            f"{self.display_name} with token '{token}' already exists",
            code=ErrorCode.DUPLICATE_TOKEN,
        )

    def _commit(self, token: str) -> None:
        try:
            self.repository.commit()
        except IntegrityError as exc:
            # A concurrent request claimed the token between check and insert
            self.session.rollback()
            raise self._duplicate(token) from exc
