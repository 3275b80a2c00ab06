# glyn

Building blocks for an ECMAScript interpreter, in plain Python with no
third-party dependencies: the language's value types, the storage behind
objects, and Unicode identifier classification.

## Modules

### `glyn.values`

- `JSValue` – a value tagged with a `ValueKind` (`UNDEFINED`, `NULL`,
  `BOOLEAN`, `STRING`, `NUMBER`, `BIG_INT`, `SYMBOL`, `OBJECT`).
  Build one with `JSValue.undefined()`, `JSValue.null()` or
  `JSValue.from_python(value)`, which maps `bool`, `int`/`float`, `str`,
  `JSNumber`, `JSString`, `JSSymbol` and `JSBigInt` to their kinds and
  treats anything else as an object (`None` raises `TypeError`).
  Predicates: `is_undefined`, `is_null`, `is_boolean`, `is_string`,
  `is_number`, `is_big_int`, `is_object`, `is_symbol`, and for numbers
  `is_nan`, `is_pos_infinite`, `is_neg_infinite`, `is_finite`.
  Object values compare by identity.
- `JSNumber` – an IEEE 754 double with the spec's numeric operations:
  `unary_minus`, `bitwise_not`, `exponentiate`, `multiply`, `divide`,
  `remainder` (truncating, as the `%` operator), `add`, `subtract`,
  `left_shift`, `signed_right_shift`, `unsigned_right_shift`,
  `bitwise_and`, `bitwise_xor`, `bitwise_or`, `equal`, `less_than`
  (returns `None` when either side is NaN) and `same_value`.
  Constants: `NAN`, `ZERO`, `POS_ZERO`, `NEG_ZERO`, `MAX_SAFE_INTEGER`,
  `MIN_SAFE_INTEGER`, `MAX_VALUE`, `MIN_VALUE`.
  `JSNumber.from_string` parses a decimal literal (no surrounding
  whitespace) and `to_string()` gives `"NaN"`, `"0"`, `"Infinity"`, a
  leading `-` for negatives, and otherwise the shortest round-trip decimal
  written without an exponent.
- `JSString` (`utf16_len`, `is_empty`), `JSSymbol` (optional
  `description`) and `JSBigInt`.
- Each type has `from_value(value)` to unwrap a `JSValue` of its kind;
  a value of another kind raises `ThrowCompletion`.

### `glyn.objects`

- `ObjectData` – an object's kind (`ObjectKind.ORDINARY`, `FUNCTION`,
  `IMMUTABLE_PROTOTYPE`), internal slots, prototype, `extensible` flag and
  own properties kept in insertion order, with `get_property(index)`,
  `has_property(key)`, `set_property(key, descriptor)` (appends and returns
  the index), `delete_property(index)` and `find_property_index(key)`.
- `PropertyKey` – a string, symbol or private name, with `is_string`,
  `is_symbol`, `is_private_name`, `is_array_index` and `as_array_index`
  (the key read as a number and clamped to the unsigned 32-bit range, or
  `None` if it is not numeric).
- `PropertyDescriptor` – optional `value`, `writable`, `get`, `set`,
  `enumerable`, `configurable`, with `is_fully_populated`, `is_empty`,
  `is_accessor_descriptor`, `is_data_descriptor` and
  `is_generic_descriptor`.
- `InternalSlots` – named slots (`InternalSlotName`); create unset slots
  with `InternalSlots.from_names(...)` and read or write `realm`,
  `initial_name`, `behaviour_fn`, `environment` and `home_object`.
- `object_from_value(value)` unwraps an object value or raises
  `ThrowCompletion`.

### `glyn.id_start` and `glyn.id_continue`

`is_unicode_id_start(ch)` and `is_unicode_id_continue(ch)` classify a single
character by the Unicode 15.1.0 `ID_Start` and `ID_Continue` derived
properties. Anything other than a one-character string raises `TypeError`
or `ValueError`. The tables are exposed as `ID_START_RANGES` and
`ID_CONTINUE_RANGES` (the latter holding only the ranges not already in
`ID_Start`), each a sorted tuple of inclusive `(first, last)` code points.

### `glyn.generate`

Builds identifier tables from `DerivedCoreProperties.txt`:
`download_derived_core_properties`, `extract_derived_core_properties`,
`extract_version`, `remove_duplicate_code_points`, `get_code_points`,
`generate_pragma` and `write_module`. The written file is a standalone
Python module defining `UNICODE_VERSION`, `ID_START_RANGES`,
`ID_CONTINUE_RANGES`, `is_unicode_id_start` and `is_unicode_id_continue`.

## Installing

```
pip install .
pip install ".[test]"   # with pytest
```

## Example

```python
from glyn.values import JSNumber, JSValue
from glyn.id_continue import is_unicode_id_continue

JSNumber(-5.0).remainder(JSNumber(5.0))   # JSNumber(-0.0)
JSValue.from_python(1.5).is_finite()      # True
is_unicode_id_continue("_")               # True
```

## Regenerating the Unicode tables

```
glyn-generate-unicode --version=15.1.0 --output=table.py
```

`--output=` (or `-o=`) is required. `--version=` (or `-v=`) picks a Unicode
release; without it the latest published data is fetched. The command needs
network access. An unknown argument or a missing output path prints a
message and exits with status 1.

## What it does not do

This package has no parser, no evaluator and no command that runs scripts.
Objects are plain storage: there are no `[[Get]]`, `[[Set]]`,
`[[DefineOwnProperty]]` or prototype-chain operations, and function objects
cannot be called or constructed. `JSBigInt` carries no numeric value, and
`JSNumber.to_string` accepts a radix but always writes decimal.

## Running the tests

```
pytest
```