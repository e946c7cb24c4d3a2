"""Product category registry.

Maps product category names to the two-character type codes used by the
custom identifier format, and back again.
"""

from types import MappingProxyType
from typing import Dict, List, Mapping, Optional

from .errors import InvalidTypeCodeError

OTHER_CATEGORY = "other"

DEFAULT_PRODUCT_TYPES: Mapping[str, str] = MappingProxyType(
    {
        "clothing": "CL",
        "electronics": "EL",
        "accessories": "AC",
        "home": "HM",
        "sports": "SP",
        "books": "BK",
        "food": "FD",
        "beauty": "BT",
        "toys": "TY",
        "other": "OT",
    }
)

TYPE_CODE_LENGTH = 2


def validate_type_code(category: str, code: object) -> str:
    """Check that ``code`` is a usable type code for ``category``.

    Raises:
        InvalidTypeCodeError: If the code is not a two-character string
    """
    if not isinstance(category, str) or not category:
        raise InvalidTypeCodeError(
            f"Product category must be a non-empty string, got {category!r}",
            category=str(category),
            code=code,
        )
    if not isinstance(code, str) or len(code) != TYPE_CODE_LENGTH:
        raise InvalidTypeCodeError(
            f"Type code for category '{category}' must be exactly "
            f"{TYPE_CODE_LENGTH} characters, got {code!r}",
            category=category,
            code=code,
        )
    return code


class TypeRegistry:
    """Bidirectional category/type-code table.

    Overrides are merged shallowly over :data:`DEFAULT_PRODUCT_TYPES`: a
    supplied category replaces its default entry, everything else is kept.
    When two categories share a code, reverse lookup resolves to the override.
    """

    def __init__(self, overrides: Optional[Mapping[str, str]] = None):
        """Build the registry.

        Args:
            overrides: Category -> code entries that extend or replace the defaults

        Raises:
            InvalidTypeCodeError: If an override is not a two-character code
        """
        overrides = dict(overrides or {})
        for category, code in overrides.items():
            validate_type_code(category, code)

        self._codes: Dict[str, str] = dict(DEFAULT_PRODUCT_TYPES)
        self._codes.update(overrides)

        self._categories: Dict[str, str] = {}
        for category, code in self._codes.items():
            if category not in overrides:
                self._categories[code] = category
        for category, code in overrides.items():
            self._categories[code] = category

    def resolve_code(self, category: str) -> str:
        """Return the code for ``category``, or the "other" code if unknown."""
        code = self._codes.get(category)
        if code is None:
            return self._codes[OTHER_CATEGORY]
        return code

    def resolve_category(self, code: str) -> str:
        """Return the category for ``code``, or ``"other"`` if unknown."""
        return self._categories.get(code, OTHER_CATEGORY)

    def is_known_code(self, code: str) -> bool:
        return code in self._categories

    @property
    def codes(self) -> List[str]:
        """All registered type codes."""
        return list(self._categories)

    @property
    def categories(self) -> List[str]:
        """All registered categories."""
        return list(self._codes)

    def as_dict(self) -> Dict[str, str]:
        """Return a copy of the merged category -> code table."""
        return dict(self._codes)

    def __contains__(self, category: object) -> bool:
        return category in self._codes

    def __len__(self) -> int:
        return len(self._codes)

    def __repr__(self) -> str:
        return f"TypeRegistry({self._codes!r})"
