from typing import Any, Mapping, Optional, Sequence, Type
from django.db.models import Model, QuerySet


class ModelRepository:
    """Thin wrapper around a model's default manager used by the services."""

    def __init__(self, model: Type[Model]) -> None:
        self.model = model

    def list(
        self,
        *,
        filters: Optional[Mapping[str, Any]] = None,
        order_by: Sequence[str] = (),
        related: Sequence[str] = (),
    ) -> QuerySet:
        """Return a queryset filtered by ``filters`` and ordered by ``order_by``."""
        qs: QuerySet = self.model.objects.filter(**(filters or {}))
        if related:
            qs = qs.select_related(*related)
        return qs.order_by(*order_by) if order_by else qs

    def first(self, **lookup: Any) -> Optional[Model]:
        """Return the first object matching the lookup, or None."""
        return self.model.objects.filter(**lookup).first()

    def exists(self, **lookup: Any) -> bool:
        return self.model.objects.filter(**lookup).exists()

    def create(self, **data: Any) -> Model:
        """Create and return a new object."""
        return self.model.objects.create(**data)

    def update(self, lookup: Mapping[str, Any], **data: Any) -> int:
        """Update objects matching lookup; return count updated."""
        return self.model.objects.filter(**lookup).update(**data)

    def delete(self, **lookup: Any) -> int:
        """Delete objects matching lookup; return count deleted."""
        count, _ = self.model.objects.filter(**lookup).delete()
        return count
