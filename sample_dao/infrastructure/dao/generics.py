"""Runtime discovery of the type arguments a DAO subclass was declared with.

``class PersonDAO(BaseDAO[PersonEntity, int, Person])`` records its
parameterized base in ``__orig_bases__``. Walking those bases lets the
DAO base classes find the mapped entity class without asking every
subclass to repeat it.
"""

from typing import Any, Optional, TypeVar, get_args, get_origin


class DAOConfigurationError(TypeError):
    """Raised when a DAO class does not bind a concrete entity type."""


def resolve_type_argument(
    cls: type, generic_base: type, index: int = 0
) -> Optional[Any]:
    """
    Find the concrete type bound to one parameter of a generic base class.

    Intermediate generic subclasses are followed, with their own type
    variables substituted by whatever the subclass bound them to.

    Args:
        cls: The class whose hierarchy is searched
        generic_base: The generic class whose parameter is wanted
        index: Position of the parameter in generic_base's declaration

    Returns:
        The bound type, or None if it is still a type variable

    Example:
        class PersonDAO(BaseDAO[PersonEntity, int, Person]): ...

        resolve_type_argument(PersonDAO, BaseDAO, 0)  # PersonEntity
    """
    return _resolve(cls, generic_base, index, {})


def _resolve(
    klass: type, generic_base: type, index: int, bindings: dict[Any, Any]
) -> Optional[Any]:
    # Only the class's own bases; __orig_bases__ would otherwise be inherited
    bases = klass.__dict__.get("__orig_bases__", klass.__bases__)

    for base in bases:
        origin = get_origin(base) or base
        if not isinstance(origin, type) or not issubclass(origin, generic_base):
            continue

        args = tuple(
            bindings.get(arg, arg) if isinstance(arg, TypeVar) else arg
            for arg in get_args(base)
        )

        if origin is generic_base:
            if len(args) <= index:
                return None
            found = args[index]
            return None if isinstance(found, TypeVar) else found

        parameters = getattr(origin, "__parameters__", ())
        found = _resolve(origin, generic_base, index, dict(zip(parameters, args)))
        if found is not None:
            return found

    return None
