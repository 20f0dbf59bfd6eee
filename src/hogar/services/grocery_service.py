"""Grocery list service."""
from collections import Counter
from typing import Dict, List, Optional, Sequence, Tuple

from sqlalchemy import select
from sqlalchemy.orm import Session

from hogar.models import GroceryItem
from hogar.domain.parser import parse_grocery_entry
from hogar.domain.categories import CATEGORIES, categorize, is_known_category
from .base_service import BaseService, Result

EMPTY_NAME_ERROR = "El nombre del artículo no puede estar vacío."
INVALID_QUANTITY_ERROR = "La cantidad debe ser un número positivo."


class GroceryService(BaseService):
    """Service for the household's shared grocery list."""

    def _validate_quantity(self, quantity) -> Result[float]:
        try:
            value = float(quantity)
        except (TypeError, ValueError):
            return Result.fail(INVALID_QUANTITY_ERROR)
        if value <= 0:
            return Result.fail(INVALID_QUANTITY_ERROR)
        if value > self.settings.MAX_QUANTITY:
            return Result.fail(
                f"La cantidad no puede ser mayor a {self.settings.MAX_QUANTITY:g}."
            )
        return Result.ok(value)

    def _validate_name(self, name: Optional[str]) -> Result[str]:
        name = (name or "").strip()
        if not name:
            return Result.fail(
                EMPTY_NAME_ERROR,
                suggestions=["Escribe el artículo, por ejemplo: 2 litros de leche"]
            )
        if len(name) > 100:
            return Result.fail("El nombre del artículo no puede superar 100 caracteres.")
        return Result.ok(name)

    def _get_household_item(
        self,
        session: Session,
        item_id: int
    ) -> Tuple[Optional[GroceryItem], Optional[Result[GroceryItem]]]:
        item = session.get(GroceryItem, item_id)
        if not item:
            return None, Result.fail("Artículo no encontrado")
        if not self._in_household(item.owner_id):
            return None, Result.fail("No tienes permiso para modificar este artículo")
        return item, None

    def add_item(
        self,
        text: str,
        quantity: Optional[float] = None,
        unit: Optional[str] = None,
        category: Optional[str] = None
    ) -> Result[GroceryItem]:
        """
        Add an item to the list from what the user typed.

        Quantity and unit are read from the text unless given explicitly.
        The category is guessed from the name unless given explicitly.

        Args:
            text: Free text such as "2 litros de leche"
            quantity: Explicit quantity, overrides the parsed one
            unit: Explicit unit, overrides the parsed one (blank clears it)
            category: Explicit category label

        Returns:
            Result containing the created item or error
        """
        entry = parse_grocery_entry(text)
        self.logger.debug("Parsed grocery entry", text=text, entry=entry.model_dump())

        name_result = self._validate_name(entry.name)
        if not name_result.success:
            return name_result

        quantity_result = self._validate_quantity(
            entry.quantity if quantity is None else quantity
        )
        if not quantity_result.success:
            return quantity_result

        if unit is not None:
            unit = unit.strip().lower() or None
        else:
            unit = entry.unit

        if category is None:
            category = categorize(entry.name)
        elif not is_known_category(category):
            return Result.fail(
                f"Categoría desconocida: {category}",
                suggestions=list(CATEGORIES)
            )

        try:
            with self.transaction.transaction() as session:
                item = GroceryItem(
                    name=name_result.data,
                    normalized_name=name_result.data.lower(),
                    quantity=quantity_result.data,
                    unit=unit,
                    category=category,
                    owner_id=self.user_id,
                )
                session.add(item)
                session.commit()
                session.refresh(item)

                self._log_action(
                    "add_item",
                    item_id=item.id,
                    name=item.name,
                    quantity=item.quantity,
                    unit=item.unit,
                    category=item.category
                )
                return Result.ok(item)

        except Exception:
            self.logger.exception("Failed to add item")
            return Result.fail("Error al añadir artículo")

    def mark_bought(
        self,
        item_id: int,
        is_bought: bool = True
    ) -> Result[GroceryItem]:
        """
        Mark an item as bought or not bought.

        Args:
            item_id: ID of the item
            is_bought: Whether the item was bought (default: True)

        Returns:
            Result containing the updated item or error
        """
        try:
            with self.transaction.transaction() as session:
                item, error = self._get_household_item(session, item_id)
                if error:
                    return error

                if item.is_archived:
                    return Result.fail("No se puede modificar un artículo archivado")

                item.is_bought = is_bought
                item.bought_at = self._get_now() if is_bought else None

                session.commit()
                session.refresh(item)

                self._log_action("mark_item", item_id=item_id, is_bought=is_bought)
                return Result.ok(item)

        except Exception:
            self.logger.exception("Failed to mark item")
            return Result.fail("Error al actualizar artículo")

    def toggle_bought(self, item_id: int) -> Result[GroceryItem]:
        """Flip an item's bought flag."""
        item = self.session.get(GroceryItem, item_id)
        if not item:
            return Result.fail("Artículo no encontrado")
        return self.mark_bought(item_id, not item.is_bought)

    def update_item(
        self,
        item_id: int,
        name: Optional[str] = None,
        quantity: Optional[float] = None,
        unit: Optional[str] = None,
        category: Optional[str] = None
    ) -> Result[GroceryItem]:
        """
        Update some of an item's fields. ``None`` leaves a field unchanged;
        an empty unit clears it.

        Returns:
            Result containing the updated item or error
        """
        changes = {}
        if name is not None:
            name_result = self._validate_name(name)
            if not name_result.success:
                return name_result
            changes["name"] = name_result.data
            changes["normalized_name"] = name_result.data.lower()

        if quantity is not None:
            quantity_result = self._validate_quantity(quantity)
            if not quantity_result.success:
                return quantity_result
            changes["quantity"] = quantity_result.data

        if unit is not None:
            changes["unit"] = unit.strip().lower() or None

        if category is not None:
            if not is_known_category(category):
                return Result.fail(
                    f"Categoría desconocida: {category}",
                    suggestions=list(CATEGORIES)
                )
            changes["category"] = category

        try:
            with self.transaction.transaction() as session:
                item, error = self._get_household_item(session, item_id)
                if error:
                    return error

                for field_name, value in changes.items():
                    setattr(item, field_name, value)

                session.commit()
                session.refresh(item)

                self._log_action("update_item", item_id=item_id, fields=sorted(changes))
                return Result.ok(item)

        except Exception:
            self.logger.exception("Failed to update item")
            return Result.fail("Error al actualizar artículo")

    def delete_item(self, item_id: int) -> Result[GroceryItem]:
        """
        Permanently remove an item.

        Args:
            item_id: ID of the item to remove

        Returns:
            Result containing the removed item or error
        """
        try:
            with self.transaction.transaction() as session:
                item, error = self._get_household_item(session, item_id)
                if error:
                    return error

                session.delete(item)
                session.commit()

                self._log_action("delete_item", item_id=item_id)
                return Result.ok(item)

        except Exception:
            self.logger.exception("Failed to delete item")
            return Result.fail("Error al eliminar artículo")

    def archive_bought(self) -> Result[int]:
        """
        Move every bought household item out of the active list.

        Returns:
            Result containing how many items were archived
        """
        try:
            with self.transaction.transaction() as session:
                items = session.execute(
                    select(GroceryItem).where(
                        GroceryItem.owner_id.in_(self.household_ids),
                        GroceryItem.is_bought == True,
                        GroceryItem.is_archived == False
                    )
                ).scalars().all()

                now = self._get_now()
                for item in items:
                    item.is_archived = True
                    item.archived_at = now

                session.commit()

                self._log_action("archive_bought", archived_count=len(items))
                return Result.ok(len(items))

        except Exception:
            self.logger.exception("Failed to archive bought items")
            return Result.fail("Error al archivar artículos comprados")

    def get_items(
        self,
        include_bought: bool = True,
        include_archived: bool = False
    ) -> Result[List[GroceryItem]]:
        """
        Get the household's items, newest first.

        Args:
            include_bought: Whether to include bought items (default: True)
            include_archived: Whether to include archived items (default: False)

        Returns:
            Result containing the items or error
        """
        try:
            query = (
                select(GroceryItem)
                .where(GroceryItem.owner_id.in_(self.household_ids))
                .order_by(GroceryItem.created_at.desc(), GroceryItem.id.desc())
            )
            if not include_bought:
                query = query.where(GroceryItem.is_bought == False)
            if not include_archived:
                query = query.where(GroceryItem.is_archived == False)

            items = list(self.session.execute(query).scalars().all())
            return Result.ok(items)

        except Exception:
            self.logger.exception("Failed to load items")
            return Result.fail("Error al cargar la lista")

    @staticmethod
    def group_by_category(
        items: Sequence[GroceryItem]
    ) -> Dict[str, List[GroceryItem]]:
        """
        Group items by category in category priority order.

        Pending items come before bought ones inside each group; otherwise
        the incoming order is kept. Categories without items are left out.
        """
        groups: Dict[str, List[GroceryItem]] = {label: [] for label in CATEGORIES}
        for item in sorted(items, key=lambda i: i.is_bought):
            groups.setdefault(item.category, []).append(item)
        return {label: grouped for label, grouped in groups.items() if grouped}

    def suggest_items(
        self,
        prefix: str = "",
        limit: Optional[int] = None
    ) -> Result[List[str]]:
        """
        Suggest item names from what the household bought before.

        Names already pending on the list are skipped. Most frequently bought
        names come first, ties broken by the most recent purchase.

        Args:
            prefix: Only suggest names starting with this text (any case)
            limit: Maximum number of suggestions (default: SUGGESTION_LIMIT)

        Returns:
            Result containing suggested display names
        """
        if limit is None:
            limit = self.settings.SUGGESTION_LIMIT
        prefix = (prefix or "").strip().lower()

        try:
            history = self.session.execute(
                select(GroceryItem)
                .where(
                    GroceryItem.owner_id.in_(self.household_ids),
                    (GroceryItem.is_bought == True) | (GroceryItem.is_archived == True)
                )
                .order_by(GroceryItem.updated_at.desc(), GroceryItem.id.desc())
            ).scalars().all()

            pending = set(self.session.execute(
                select(GroceryItem.normalized_name).where(
                    GroceryItem.owner_id.in_(self.household_ids),
                    GroceryItem.is_bought == False,
                    GroceryItem.is_archived == False
                )
            ).scalars().all())

            counts: Counter = Counter()
            display: Dict[str, str] = {}
            recency: Dict[str, int] = {}
            for position, item in enumerate(history):
                key = item.normalized_name
                if key in pending or not key.startswith(prefix):
                    continue
                counts[key] += 1
                display.setdefault(key, item.name)
                recency.setdefault(key, position)

            ranked = sorted(counts, key=lambda key: (-counts[key], recency[key]))
            suggestions = [display[key] for key in ranked[:limit]]

            self.logger.debug("Suggested items", prefix=prefix, count=len(suggestions))
            return Result.ok(suggestions)

        except Exception:
            self.logger.exception("Failed to suggest items")
            return Result.fail("Error al cargar sugerencias")
