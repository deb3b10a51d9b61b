from typing import Any, List, Mapping, Optional, Sequence, Type
from django.db.models import Model, QuerySet


class DB_Accessor:
    """Generic data accessor over a model's default manager.

    Models carrying a ``deleted_at`` column are treated as soft-deletable:
    every read goes through ``alive()`` and removal stamps the column
    instead of erasing rows.
    """

    def __init__(self, model: Type[Model]) -> None:
        self.model = model

    @property
    def soft_deletes(self) -> bool:
        return any(f.name == "deleted_at" for f in self.model._meta.get_fields())

    def base_queryset(self) -> QuerySet:
        """Return every row visible to reads."""
        qs: QuerySet = self.model.objects.all()
        if self.soft_deletes:
            qs = qs.filter(deleted_at__isnull=True)
        return qs

    def list(
        self,
        *,
        filters: Optional[Mapping[str, Any]] = None,
        order_by: Sequence[str] = (),
        related: Sequence[str] = (),
    ) -> List[Model]:
        """Return visible rows matching ``filters`` as a list."""
        qs = self.base_queryset().filter(**(filters or {}))
        if related:
            qs = qs.select_related(*related)
        if order_by:
            qs = qs.order_by(*order_by)
        return list(qs)

    def exists(self, **lookup: Any) -> bool:
        return self.base_queryset().filter(**lookup).exists()

    def create(self, **data: Any) -> Model:
        """Create and return a new object."""
        return self.model.objects.create(**data)

    def update(self, lookup: Mapping[str, Any], **data: Any) -> int:
        """Update visible objects matching lookup; return count updated."""
        return self.base_queryset().filter(**lookup).update(**data)

    def soft_delete(self, lookup: Mapping[str, Any], when) -> int:
        """Stamp ``deleted_at`` on visible objects matching lookup; return count."""
        if not self.soft_deletes:
            raise TypeError(f"{self.model.__name__} does not support soft deletes")
        changes = {"deleted_at": when}
        if any(f.name == "updated_at" for f in self.model._meta.get_fields()):
            changes["updated_at"] = when
        return self.update(lookup, **changes)
