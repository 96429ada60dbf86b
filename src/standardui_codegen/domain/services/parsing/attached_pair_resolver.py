#!/usr/bin/env python3

"""Resolution of attached-property Get/Set method pairs.

Companion attached declarations (``ICanvasAttached``) describe attached
properties as accessor methods: ``GetLeft(element)`` and
``SetLeft(element, value)``. This module turns those methods into explicit
AttachedPair records and rejects every accessor that cannot be paired.
"""

from ....infrastructure.logging import get_logger
from ...errors import StructuralError
from ...models.declaration import AttachedPair, DeclarationInfo, DeclarationUnit, MethodInfo

logger = get_logger(__name__)

GETTER_PREFIX = "Get"
SETTER_PREFIX = "Set"


class AttachedPairResolver:
    """Pairs the Get/Set accessors of an attached declaration.

    Rules:
    - every method must start with "Get" or "Set"
    - a getter takes exactly one parameter, the target element
    - a setter takes exactly two parameters, the element and the value
    - every setter must have a getter for the same property
    - a setter's value type must match its getter's return type
    - a getter without a setter is a read-only attached property

    Pairs are returned in getter declaration order.
    """

    def resolve(self, attached_declaration: DeclarationInfo) -> tuple[AttachedPair, ...]:
        """Resolve all attached property pairs of a declaration.

        Args:
            attached_declaration: Companion attached declaration

        Returns:
            Tuple of AttachedPair in getter order

        Raises:
            StructuralError: For methods that are neither getters nor setters,
                malformed accessor signatures and setters without a getter
                or with a value type other than the getter's return type
        """
        declaration_name = attached_declaration.name
        getters: dict[str, MethodInfo] = {}
        setters: dict[str, MethodInfo] = {}

        for method in attached_declaration.methods:
            qualified_name = f"{declaration_name}.{method.name}"
            if method.name.startswith(GETTER_PREFIX):
                property_name = method.name[len(GETTER_PREFIX) :]
                self._check_accessor(qualified_name, property_name, method, expected_parameters=1)
                getters[property_name] = method
            elif method.name.startswith(SETTER_PREFIX):
                property_name = method.name[len(SETTER_PREFIX) :]
                self._check_accessor(qualified_name, property_name, method, expected_parameters=2)
                setters[property_name] = method
            else:
                raise StructuralError(
                    f"Attached type method {qualified_name} doesn't start with "
                    f"{GETTER_PREFIX} or {SETTER_PREFIX}",
                    subject=qualified_name,
                )

        for property_name in setters:
            if property_name not in getters:
                qualified_name = f"{declaration_name}.{SETTER_PREFIX}{property_name}"
                raise StructuralError(
                    f"Attached type method {qualified_name} has no matching "
                    f"{GETTER_PREFIX}{property_name} method",
                    subject=qualified_name,
                )

        for property_name, setter in setters.items():
            getter = getters[property_name]
            value_type = setter.parameters[1].type_name
            if _normalize_type(value_type) != _normalize_type(getter.return_type):
                qualified_name = f"{declaration_name}.{SETTER_PREFIX}{property_name}"
                raise StructuralError(
                    f"Attached type method {qualified_name} value type {value_type} doesn't "
                    f"match {GETTER_PREFIX}{property_name} return type {getter.return_type}",
                    subject=qualified_name,
                )

        pairs = tuple(
            AttachedPair(property_name, getter, setters.get(property_name))
            for property_name, getter in getters.items()
        )

        read_only = [pair.property_name for pair in pairs if pair.is_read_only]
        logger.debug(
            f"Resolved {len(pairs)} attached properties on {declaration_name}"
            + (f" (read-only: {', '.join(read_only)})" if read_only else "")
        )
        return pairs

    @staticmethod
    def _check_accessor(
        qualified_name: str, property_name: str, method: MethodInfo, expected_parameters: int
    ) -> None:
        if not property_name:
            raise StructuralError(
                f"Attached type method {qualified_name} doesn't name a property",
                subject=qualified_name,
            )
        if len(method.parameters) != expected_parameters:
            raise StructuralError(
                f"Attached type method {qualified_name} should take {expected_parameters} "
                f"parameter(s), but takes {len(method.parameters)}",
                subject=qualified_name,
            )


def _normalize_type(type_name: str) -> str:
    return "".join(type_name.split())

def make_declaration_unit(
    declaration: DeclarationInfo, attached_declaration: DeclarationInfo | None = None
) -> DeclarationUnit:
    """Build a DeclarationUnit, resolving attached pairs up front.

    Args:
        declaration: Primary declaration
        attached_declaration: Optional companion attached declaration

    Returns:
        DeclarationUnit with resolved attached pairs

    Raises:
        StructuralError: If the attached declaration has unpairable accessors
    """
    pairs: tuple[AttachedPair, ...] = ()
    if attached_declaration is not None:
        pairs = AttachedPairResolver().resolve(attached_declaration)
    return DeclarationUnit(declaration, attached_declaration, pairs)
