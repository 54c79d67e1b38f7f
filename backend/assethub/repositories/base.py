"""Base repository utilities."""

from __future__ import annotations

import uuid
from typing import Generic, Optional, Sequence, Tuple, Type, TypeVar

from sqlalchemy.orm import Query, Session

from assethub.domain.search import SearchCriteria

TModel = TypeVar("TModel")


class SQLAlchemyRepository(Generic[TModel]):
    """Minimal base repository storing the SQLAlchemy session."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def add(self, instance: TModel) -> TModel:
        self.session.add(instance)
        return instance

    def remove(self, instance: TModel) -> None:
        self.session.delete(instance)

    def refresh(self, instance: TModel) -> TModel:
        self.session.refresh(instance)
        return instance

    def commit(self) -> None:
        self.session.commit()


class TenantScopedRepository(SQLAlchemyRepository[TModel]):
    """Token/id lookups and paging for entities owned by a tenant.

    Subclasses set ``model`` and may override ``_apply_filters``.
    """

    model: Type[TModel]

    def _tenant_query(self, tenant_id: uuid.UUID) -> Query:
        return self.session.query(self.model).filter(self.model.tenant_id == tenant_id)

    def get_by_id(self, entity_id: uuid.UUID, tenant_id: uuid.UUID) -> Optional[TModel]:
        return self._tenant_query(tenant_id).filter(self.model.id == entity_id).first()

    def get_by_token(self, token: str, tenant_id: uuid.UUID) -> Optional[TModel]:
        return self._tenant_query(tenant_id).filter(self.model.token == token).first()

    def search(
        self,
        tenant_id: uuid.UUID,
        criteria: SearchCriteria,
    ) -> Tuple[int, Sequence[TModel]]:
        query = self._apply_filters(self._tenant_query(tenant_id), criteria)
        total = query.count()
        records = (
            query.order_by(self.model.created_at.asc(), self.model.token.asc())
            .offset(criteria.offset)
            .limit(criteria.page_size)
            .all()
        )
        return total, records

    def _apply_filters(self, query: Query, criteria: SearchCriteria) -> Query:
        return query
