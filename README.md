# lyra

Tools for the Lyra language: a lexer, a parser that builds a small syntax tree,
and a compiler driver that reports diagnostics.

The language is still small at this stage. A program is made of `let` bindings
and expressions. An expression is an identifier, an integer, a string or a
function call whose callee is an identifier. Line comments start with `#`.

```
# greet the world
let greeting = "hello"
print(greeting, 1)
```

## Installation

```
pip install .
```

## Command line

Two commands are installed.

`lyra compile FILE` compiles a source file. It prints any diagnostics to
standard error and then prints `compiled FILE`:

```
lyra compile hello.ly
lyra compile hello.ly --emit ast
lyra compile hello.ly --emit tokens
```

`lyrac FILE` prints the compiler name and version (`Lyra compiler v0.1.0`) and
then compiles the file, printing any diagnostics to standard error. It takes
the same `--emit` option:

```
lyrac hello.ly --emit tokens
```

`--emit` takes one of `none` (the default), `ast` or `tokens`. Use it to look at
the syntax tree or the token stream while debugging. Both commands also take
`--version`.

Diagnostics look like this:

```
error: expected identifier after 'let' at 4..5
```

The two numbers are byte offsets into the source. Diagnostics in the source do
not change the exit status; if the file cannot be read, the command prints an
`Error:` line to standard error and exits with status 1.

## Library

```python
from lyra.compiler import compile_source

out = compile_source('let x = 1\nprint("hi", x)\n')
for item in out.module.items:
    print(item)
for diagnostic in out.diagnostics:
    print(diagnostic.severity, diagnostic.message, diagnostic.span)
```

Each stage can also be run on its own:

```python
from lyra.lexer import tokenize
from lyra.parser import parse

tokens, lex_diagnostics = tokenize("print(1, 2)")
module, parse_diagnostics = parse(tokens)
```

- `lyra.lexer.tokenize(source)` returns a list of `Token` values and a list of
  diagnostics. Each token has a `TokenKind`, a `Span` and, for identifiers,
  integers and strings, a `value`. The list always ends with an `EOF` token.
- `lyra.parser.parse(tokens)` returns a `Module` and a list of diagnostics.
- `lyra.compiler.compile_source(source)` runs both and returns a
  `CompileOutput` with `module` and `diagnostics`; lexer diagnostics come first.
- `lyra.syntax` holds the tree: `Module`, the statements `Let` and `ExprStmt`,
  and the expressions `Ident`, `IntLiteral`, `StrLiteral` and `Call`.
- `lyra.diagnostic` holds `Span`, `Severity` and `Diagnostic`, along with
  `LYRA_NAME` and `LYRA_VERSION`.

Problems in the source do not raise exceptions. They come back as `Diagnostic`
values, each with a `Severity`, a message and an optional `Span`.

`lyra.driver.compile_file(path, emit)` reads and compiles a file, printing the
form chosen by an `Emit` value (`Emit.NONE`, `Emit.AST` or `Emit.TOKENS`). It
raises `OSError` when the file cannot be read as UTF-8 text.
`lyra.driver.print_diag(diagnostic)` writes one diagnostic to standard error.

## What it does not do

Compiling here means lexing and parsing only: no code is generated and no
program is run. The lexer recognises `{ } ; + - * /`, but the parser has no
rule for them; it reports nothing for such tokens and skips past them.

## Running the tests

```
pip install .[test]
pytest
```