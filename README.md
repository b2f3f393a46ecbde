# insanelang

A small front end for the InsaneLang toy language. It splits source text into
tokens and passes them to a parser that returns a module tree. It then prints a
short textual intermediate representation of that module.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Command line

```
insanelang program.insane
```

The command reads the file as UTF-8. Undecodable bytes are replaced. It then
prints one line per token, ending with the end-of-file token. Each line looks
like this:

```
Token: type=3 lexeme='func' line=1 col=5
```

`type` is the numeric value of the `TokenType`:

| Value | Token type   |
|-------|--------------|
| 0     | identifier   |
| 1     | number       |
| 2     | string       |
| 3     | keyword      |
| 4     | symbol       |
| 5     | end of file  |

`line` and `col` give the lexer's position just after the token was read. They
do not give the token's starting position.

After the tokens, the command prints `Parsing completed.` and then the
generated IR. Any error raised while parsing or generating is printed to
standard error as `Parser error: ...`, and the exit status is still 0.

The exit status is 1 in two cases:

- No file is given. A usage message is printed.
- The file cannot be opened. `Failed to open file <path>` is printed.

## Library use

```python
from insanelang.lexer import Lexer, tokenize
from insanelang.parser import Parser
from insanelang.codegen import CodeGenerator
from insanelang.cli import format_token

tokens = tokenize('func main() -> int { return 42; } // done')
for token in tokens:
    print(format_token(token))

module = Parser(tokens).parse()
print(CodeGenerator().generate(module))
```

- `insanelang.tokens` holds two things:
  - `TokenType`, an `IntEnum`.
  - `Token`, a frozen dataclass with the fields `type`, `lexeme`, `line` and
    `column`, and the property `is_eof`.
- `insanelang.lexer` holds `Lexer` and `tokenize(source)`:
  - `tokenize(source)` returns the full token list, ending with the end-of-file
    token.
  - `Lexer.next_token()` returns the next token and consumes it. Once the input
    is exhausted, it keeps returning end-of-file tokens.
  - `Lexer.peek_token()` returns the next token without consuming it.
  - Iterating over a `Lexer` yields the remaining tokens, up to and including
    the end-of-file token.
- `insanelang.cli.format_token(token)` returns the one-line description shown
  above. `insanelang.cli.main(argv=None)` runs the command.

### Lexical rules

- ASCII whitespace is skipped. `//` starts a comment that runs to the end of the
  line.
- An identifier starts with an ASCII letter or `_`. It continues with ASCII
  letters, digits or `_`.
- These words are keywords: `module`, `func`, `class`, `var`, `if`, `else`,
  `loop`, `unsafe`, `return`, `true`, `false`.
- A number is a run of digits. It may have a fractional part, as in `3.14`. A
  trailing `.` that is not followed by a digit is not part of the number.
- A string literal is written in double quotes. Its lexeme is the raw text
  between the quotes, with backslash escapes left as written. An unterminated
  string runs to the end of the input.
- The symbols are `( ) { } : , ; + - * / =` and also `->` and `==`. Any other
  character, including non-ASCII letters, becomes a one-character symbol.

### Tree and code generation

The tree types live in `insanelang.nodes`:

- `SourceLocation` and `NodeKind`.
- The base classes `ASTNode`, `Expression` and `Statement`.
- The expression nodes `IdentifierExpr`, `NumberLiteralExpr`,
  `StringLiteralExpr`, `BinaryExpr` and `CallExpr`.
- The statement nodes `VarDeclStmt`, `ReturnStmt`, `ExpressionStmt` and
  `BlockStmt`.
- `Parameter`, `FunctionDecl` and `ModuleDecl`.

Each node class carries its `NodeKind` as the class attribute `kind`.
`ModuleDecl.functions` lists the `FunctionDecl` members of a module in order.

`CodeGenerator.generate(module)` returns a `; Module: <name>` line followed by
one `; Function: <name>` line for each function in the module.

## What it does not do

The parser does not yet recognise any declarations, statements or
expressions. `Parser.parse()` returns an unnamed `ModuleDecl` with no members
whatever tokens it is given. As a result, the command always prints an empty
module header as its IR.

The package has no interpreter and no code generation beyond the comment lines
described above. Nothing it produces can be run.