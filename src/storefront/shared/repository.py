"""CRUD contract shared by all storefront repositories.

Every repository reads back what it writes, so identifiers and timestamps
generated by the domain are authoritative. Lookups never raise on a miss:
``find_by_id`` returns ``None`` and ``update``/``delete`` report the miss in
their return value instead.
"""

from protean.core.repository import BaseRepository
from protean.exceptions import ObjectNotFoundError


class CrudRepository(BaseRepository):
    """Base for repositories registered with ``@storefront.repository``.

    Aggregates managed through this contract expose a ``create`` factory and
    an ``update_details(**changes)`` method.
    """

    # Field used by ``find_all``; prefix with ``-`` for descending order.
    default_ordering = "created_at"

    def find_all(self) -> list:
        return self._dao.query.order_by(self.default_ordering).all().items

    def find_by_id(self, identifier):
        if identifier is None:
            return None
        try:
            return self.get(identifier)
        except ObjectNotFoundError:
            return None

    def create(self, **data):
        """Persist a new aggregate built from ``data`` and return the stored copy."""
        aggregate = self.meta_.part_of.create(**data)
        self.add(aggregate)
        return self.get(aggregate.id)

    def update(self, identifier, **changes):
        """Merge ``changes`` over the current row.

        Keys that are not supplied keep their current values. Returns ``None``
        when nothing is stored under ``identifier``.
        """
        aggregate = self.find_by_id(identifier)
        if aggregate is None:
            return None

        if changes:
            aggregate.update_details(**changes)
            self.add(aggregate)

        return self.get(identifier)

    def delete(self, identifier) -> bool:
        aggregate = self.find_by_id(identifier)
        if aggregate is None:
            return False

        self._dao.delete(aggregate)
        return True

    def count(self) -> int:
        return self._dao.query.all().total
