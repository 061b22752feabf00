"""Assignment of generated values to an instance's settable properties.

A property is settable when it is

- a public annotated attribute (dataclass field, pydantic field or plain
  class annotation) that is not a ``ClassVar``/``Final``, or
- a public :class:`property` defining a setter; its type comes from the
  setter's value parameter, else from the getter's return annotation.

Nothing is settable on tuples, frozen dataclasses and frozen pydantic models.
Properties are visited in declaration order, which carries no meaning.
"""

from __future__ import annotations

import dataclasses
import functools
import inspect
import logging
from collections.abc import Callable, Collection
from dataclasses import dataclass
from typing import Any

from contractgen.utils.errors import PropertyAssignmentError, UnsupportedTypeError

from .guard import RecursionGuard
from .introspect import callable_hints, class_hints, is_class_var, is_pydantic_model

Dispatch = Callable[[Any, RecursionGuard, str | None], Any]


@dataclass(frozen=True)
class Property:
    name: str
    annotation: Any


def _is_frozen(tp: type) -> bool:
    if issubclass(tp, tuple):
        return True
    if dataclasses.is_dataclass(tp) and tp.__dataclass_params__.frozen:
        return True
    return is_pydantic_model(tp) and bool(tp.model_config.get("frozen"))


def _property_annotation(prop: property, owner: type) -> Any:
    params = list(inspect.signature(prop.fset).parameters.values())
    if len(params) >= 2:
        hint = callable_hints(prop.fset, owner).get(params[1].name)
        if hint is not None:
            return hint
    if prop.fget is not None:
        return callable_hints(prop.fget, owner).get("return")
    return None


@functools.lru_cache(maxsize=512)
def settable_properties(tp: type) -> tuple[Property, ...]:
    """Return the publicly settable properties of ``tp``."""

    if _is_frozen(tp):
        return ()

    found: dict[str, Property] = {}
    for name, hint in class_hints(tp).items():
        if name.startswith("_") or is_class_var(hint) or isinstance(hint, dataclasses.InitVar):
            continue
        static = inspect.getattr_static(tp, name, None)
        if isinstance(static, property):
            if static.fset is None:
                continue
        found[name] = Property(name, hint)

    for klass in tp.__mro__:
        for name, attr in vars(klass).items():
            if name.startswith("_") or name in found or not isinstance(attr, property):
                continue
            if attr.fset is None or inspect.getattr_static(tp, name) is not attr:
                continue
            annotation = _property_annotation(attr, tp)
            if annotation is not None:
                found[name] = Property(name, annotation)
    return tuple(found.values())


class PropertyFiller:
    """Fill settable properties using a dispatch callback.

    Parameters
    ----------
    dispatch:
        Callable producing a value for ``(annotation, guard, property_name)``.
    strict:
        When ``True`` the first failing property aborts with
        :class:`PropertyAssignmentError`; otherwise the failure is logged and
        the remaining properties are still filled.
    logger:
        Receiver of lenient-mode failures.

    :class:`UnsupportedTypeError` always propagates, whatever the policy.
    """

    def __init__(self, dispatch: Dispatch, *, strict: bool, logger: logging.Logger) -> None:
        self._dispatch = dispatch
        self._strict = strict
        self._logger = logger

    def fill(
        self, instance: Any, guard: RecursionGuard, supplied: Collection[str] = ()
    ) -> None:
        """Fill every settable property of ``instance`` not named in ``supplied``.

        ``supplied`` lists values already passed to the constructor.
        """

        owner = type(instance)
        for prop in settable_properties(owner):
            if prop.name in supplied:
                continue
            try:
                setattr(instance, prop.name, self._dispatch(prop.annotation, guard, prop.name))
            except UnsupportedTypeError:
                raise
            except Exception as exc:
                error = PropertyAssignmentError(owner, prop.name, exc)
                if self._strict:
                    raise error from exc
                self._logger.warning("%s", error, exc_info=error)


__all__ = ["Property", "PropertyFiller", "settable_properties"]
