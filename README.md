# megaladon

An interpreter for Megaladon, a small dynamically typed scripting language
with numbers, strings, booleans, lists, global variables, blocks,
`if`/`else`, `while` and `for` loops, and a few built-in functions.

## Installing

```
pip install .
```

## Running

Run a script file:

```
megaladon script.mgl
```

Start the interactive prompt by running the command with no arguments:

```
megaladon
```

At the prompt each line is run on its own. A line without a `;` that does
not start with `var `, `fun `, `if `, `while `, `for ` or `print ` is taken
as an expression and its value is printed; other lines without a `;` get
one appended. Type `exit()` or send end of input to leave.

Exit codes for script files: 64 for wrong usage (more than one argument),
65 for lexical or syntax errors, 70 for runtime errors and 74 when the file
cannot be opened.

Syntax errors are written to standard error as
`[line N] Error at 'lexeme': message`; runtime errors as
`Runtime Error: ...`, and execution stops at the first one.

## The language

```
var greeting = "hello";
print greeting;          // "hello"

var xs = [3, 1, 2];
print xs[0];             // 3
print len(xs);           // 3
print xs + [4];          // [3, 1, 2, 4]

var i = 0;
while (i < 3) {
    if (i == 1) print "one"; else print i;
    i = i + 1;
}
```

Values: numbers (whole numbers print without a decimal point, others with
up to six decimals), strings, `true`/`false`, lists written as `[a, b, c]`,
and `void` for the absence of a value (`nil` evaluates to `void`). Only
`void` and `false` are falsy.

Operators: `+ - * /`, unary `-` and `!`, comparison `< <= > >=`, equality
`== !=`, and short-circuiting `and` / `or`. `+` adds two numbers or joins
two strings or two lists. Division by zero is a runtime error. Comments run
from `//` to the end of the line.

`for (init; condition; increment) body` is run as the equivalent `while`
loop.

Built-in functions: `input()` reads one line from standard input and
`len(value)` gives the length of a string or list. A `print` built-in is
also defined, but `print` is a keyword, so `print(x);` is the `print`
statement.

## What the language does not do

- String literals keep their surrounding double quotes as part of the
  value: `print "one";` shows `"one"`, and `len("ab")` is 4.
- Variables are read and assigned in the global scope only. A `var`
  declared inside a block or in a `for` initializer cannot be read back
  (`Undefined variable`), so write `for` loops over a global variable:
  `var i = 0; for (; i < 3; i = i + 1) print i;`.
- There are no user-defined functions: `fun` is reported as a syntax error.
- Property access with `.` is a syntax error.
- `%` is recognised but evaluates to `invalid`.
- List indices must be literal whole numbers (`xs[0]`, not `xs[i]`), and
  indexed assignment `xs[0] = 10` checks the index and yields the value but
  leaves the list unchanged.
- The list and string helpers described below are not callable from
  programs.

## Using it from Python

```python
from megaladon.cli import run
from megaladon.errors import ErrorReporter

reporter = ErrorReporter()
run("print 1 + 2;", reporter)
print(reporter.had_error, reporter.had_runtime_error)
```

`run` lexes, parses and executes the source and returns the
`ErrorReporter`, whose `stream` (standard error by default) receives the
error messages. The stages are also available separately:
`megaladon.lexer.tokenize`, `megaladon.parser.parse` and
`megaladon.interpreter.Interpreter`, which takes an `output` stream for
printed values.

`megaladon.list_methods` (`list_add`, `list_get`, `list_set`,
`list_insert_at`, `list_remove_at`, `list_remove`, `list_pop`,
`list_clear`, `list_sort`) and `megaladon.string_methods` (`string_len`,
`string_substring`, `string_to_lower`, `string_to_upper`, `string_trim`,
`string_starts_with`, `string_ends_with`, `string_contains`,
`string_replace`, `string_split`, `string_index_of`, `string_to_list`,
`string_count_vowels`) operate on Python values, taking the list or string
as the first element of their argument list.

## Tests

```
pip install .[test]
pytest
```