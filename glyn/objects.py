"""Objects: kinds, internal slots, property keys, property descriptors and object data."""

from __future__ import annotations

import enum
import math
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Iterable, List, Optional, Union

from glyn.values import JSNumber, JSString, JSSymbol, JSValue, ThrowCompletion, ValueKind

BehaviourFn = Callable[[List[JSValue]], JSValue]

_UINT32_MAX = 2**32 - 1


class ObjectKind(enum.Enum):
    """Which set of internal methods an object uses."""

    ORDINARY = "ordinary"
    FUNCTION = "function"
    IMMUTABLE_PROTOTYPE = "immutable_prototype"


class InternalSlotName(enum.Enum):
    BEHAVIOUR_FN = "BehaviourFn"
    HOME_OBJECT = "HomeObject"
    INITIAL_NAME = "InitialName"
    REALM = "Realm"
    ENVIRONMENT = "Environment"


class _NotSet:
    """Marker for a slot that exists but holds nothing yet."""

    _instance: Optional["_NotSet"] = None

    def __new__(cls) -> "_NotSet":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "NOT_SET"


_NOT_SET = _NotSet()


class InternalSlots:
    """The internal slots of an object, keyed by slot name."""

    def __init__(self) -> None:
        self._slots: Dict[InternalSlotName, Any] = {}

    @classmethod
    def from_names(cls, names: Iterable[InternalSlotName]) -> "InternalSlots":
        """Create slots with the given names, none of them set."""
        slots = cls()
        for name in names:
            slots._slots[name] = _NOT_SET
        return slots

    def __contains__(self, name: object) -> bool:
        return name in self._slots

    def __len__(self) -> int:
        return len(self._slots)

    def __repr__(self) -> str:
        return f"InternalSlots({self._slots!r})"

    def _get(self, name: InternalSlotName) -> Any:
        value = self._slots.get(name, _NOT_SET)
        return None if value is _NOT_SET else value

    def realm(self) -> Any:
        return self._get(InternalSlotName.REALM)

    def set_realm(self, realm: Any) -> None:
        self._slots[InternalSlotName.REALM] = realm

    def initial_name(self) -> Optional[JSString]:
        value = self._get(InternalSlotName.INITIAL_NAME)
        if isinstance(value, JSValue) and value.kind is ValueKind.STRING:
            return value.payload
        return None

    def set_initial_name(self, name: JSString) -> None:
        self._slots[InternalSlotName.INITIAL_NAME] = JSValue(ValueKind.STRING, name)

    def behaviour_fn(self) -> Optional[BehaviourFn]:
        return self._get(InternalSlotName.BEHAVIOUR_FN)

    def set_behaviour_fn(self, func: BehaviourFn) -> None:
        self._slots[InternalSlotName.BEHAVIOUR_FN] = func

    def environment(self) -> Any:
        return self._get(InternalSlotName.ENVIRONMENT)

    def set_environment(self, environment: Any) -> None:
        self._slots[InternalSlotName.ENVIRONMENT] = environment

    def home_object(self) -> Optional["ObjectData"]:
        value = self._get(InternalSlotName.HOME_OBJECT)
        if isinstance(value, JSValue) and value.kind is ValueKind.OBJECT:
            return value.payload
        return None

    def set_home_object(self, home_object: "ObjectData") -> None:
        self._slots[InternalSlotName.HOME_OBJECT] = JSValue(ValueKind.OBJECT, home_object)


def _saturating_u32(x: float) -> int:
    if math.isnan(x) or x <= 0:
        return 0
    if x >= _UINT32_MAX:
        return _UINT32_MAX
    return int(x)


@dataclass(frozen=True)
class PropertyKey:
    """A property key: a string, a symbol, or a private name (a plain str)."""

    value: Union[JSString, JSSymbol, str]

    def is_string(self) -> bool:
        return isinstance(self.value, JSString)

    def is_symbol(self) -> bool:
        return isinstance(self.value, JSSymbol)

    def is_private_name(self) -> bool:
        return isinstance(self.value, str)

    def is_array_index(self) -> bool:
        return self.as_array_index() is not None

    def as_array_index(self) -> Optional[int]:
        """Return the key read as an unsigned 32-bit index, or None if it is not numeric."""
        if not isinstance(self.value, JSString):
            return None
        try:
            number = JSNumber.from_string(self.value)
        except ThrowCompletion:
            return None
        return _saturating_u32(number.value)


@dataclass
class PropertyDescriptor:
    """A property descriptor; each field is None when absent."""

    value: Optional[JSValue] = None
    writable: Optional[bool] = None
    get: Optional[JSValue] = None
    set: Optional[JSValue] = None
    enumerable: Optional[bool] = None
    configurable: Optional[bool] = None

    def _fields(self) -> tuple:
        return (self.value, self.writable, self.get, self.set, self.enumerable, self.configurable)

    def is_fully_populated(self) -> bool:
        return all(f is not None for f in self._fields())

    def is_empty(self) -> bool:
        return all(f is None for f in self._fields())

    def is_accessor_descriptor(self) -> bool:
        return self.get is not None or self.set is not None

    def is_data_descriptor(self) -> bool:
        return self.value is not None or self.writable is not None

    def is_generic_descriptor(self) -> bool:
        """True when a value or writable field is present, as for data descriptors."""
        return self.value is not None or self.writable is not None


@dataclass(eq=False)
class ObjectData:
    """The state of an object: prototype, extensibility, slots and own properties."""

    kind: ObjectKind = ObjectKind.ORDINARY
    slots: InternalSlots = field(default_factory=InternalSlots)
    prototype: Optional["ObjectData"] = None
    extensible: bool = True
    keys: List[PropertyKey] = field(default_factory=list)
    values: List[PropertyDescriptor] = field(default_factory=list)

    def get_property(self, index: int) -> Optional[PropertyDescriptor]:
        if 0 <= index < len(self.values):
            return self.values[index]
        return None

    def has_property(self, key: PropertyKey) -> bool:
        return key in self.keys

    def set_property(self, key: PropertyKey, value: PropertyDescriptor) -> int:
        """Append a property and return its index."""
        self.keys.append(key)
        self.values.append(value)
        return len(self.keys) - 1

    def delete_property(self, index: int) -> bool:
        """Remove the property at index; an out-of-range index raises IndexError."""
        self.keys.pop(index)
        self.values.pop(index)
        return True

    def find_property_index(self, key: PropertyKey) -> Optional[int]:
        try:
            return self.keys.index(key)
        except ValueError:
            return None


def object_from_value(value: JSValue) -> ObjectData:
    """Extract the object held by an Object value."""
    if value.kind is ValueKind.OBJECT:
        return value.payload
    raise ThrowCompletion("Expected an Object value for conversion to an object")