# fixed8

A small fixed-point number type. Each value is held as a signed 32-bit
integer with 8 fractional bits, so the smallest step between two values
is 1/256.

## Installing

    pip install .

To run the tests as well:

    pip install ".[test]"
    pytest

## Using the `Fixed` type

```python
from fixed8.fixed import Fixed, fixed_max, fixed_min

a = Fixed(10)          # from an integer
b = Fixed(42.42)       # from a float, rounded to the nearest 1/256
c = Fixed.from_raw(1)  # from the underlying raw bits
z = Fixed()            # zero

print(b)               # 42.4219
print(b.to_int())      # 42
print(b.raw)           # 10860

d = Fixed(5.05) * Fixed(2)
print(d)               # 10.1016

print(c.next_up())     # one step (1/256) higher
print(c.next_down())   # one step lower

print(fixed_max(a, d)) # the larger of the two
print(fixed_min(a, d)) # the smaller of the two
```

Details of the behaviour:

- `Fixed(value)` accepts another `Fixed`, an `int` or a `float`. Floats
  are taken at single precision and rounded half away from zero. A
  `bool` or any other type raises `TypeError`; NaN and infinities raise
  `ValueError`.
- `to_float()` (also `float(x)`) gives the value computed at single
  precision; `to_int()` (also `int(x)`) gives the integer part rounded
  towards negative infinity. `str(x)` shows the float value in `%g` form,
  and `repr(x)` shows `Fixed.from_raw(<raw>)`.
- Values compare with `==`, `<`, `<=`, `>`, `>=` against other `Fixed`
  values and can be hashed.
- `+`, `-`, `*` and `/` work between `Fixed` values and also with plain
  `int` or `float` operands on either side; unary `-` negates.
  Multiplication drops the lower 8 bits of the product (rounding towards
  negative infinity); division truncates towards zero. Dividing by zero
  raises `ZeroDivisionError`.
- All results wrap around like a signed 32-bit integer on overflow.
- `fixed_min` and `fixed_max` return the second argument when the two
  are equal.

## Demo

Short walkthroughs of copying, conversion and arithmetic:

    fixed8-demo                # all of them
    fixed8-demo raw            # raw bits of copied values
    fixed8-demo conversion     # int and float construction and conversion
    fixed8-demo arithmetic     # stepping, multiplication and fixed_max

The same walkthroughs are available from Python as
`fixed8.demo.raw_bits_demo()`, `fixed8.demo.conversion_demo()` and
`fixed8.demo.arithmetic_demo()`, each returning its output lines as a
list of strings.