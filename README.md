# memomark

memomark parses the markdown dialect used in short notes and memos. It turns
markdown text into a tree of nodes. You can write that tree back as markdown,
render it as HTML or reduce it to plain text.

On top of the common markdown syntax it handles:

- tags (`#idea`)
- highlights (`==text==`)
- spoilers (`||text||`)
- subscript (`~x~`) and superscript (`^x^`)
- strikethrough (`~~text~~`)
- inline math (`$...$`) and math blocks fenced by `$$` lines
- ordered, unordered and task lists, nested by indentation
- pipe tables
- references to other content (`[[memos/1]]`)
- embedded content (`![[resources/101?align=center]]`)
- the `<br />` element

## Installation

```
pip install memomark
```

memomark needs Python 3.11 or later. It has no runtime dependencies.

## Usage

```python
from memomark.api import parse, restore, to_html, to_plain_text

nodes = parse("# Hello\n**bold** and #tag")

print(to_html(nodes))
# <h1>Hello</h1><p><strong>bold</strong> and <span>#tag</span></p>

print(restore(nodes))
# # Hello
# **bold** and #tag

print(to_plain_text(nodes))
```

- `parse(markdown)` returns a list of nodes.
- `restore(nodes)` returns the markdown for those nodes.
- `to_html(nodes)` renders the nodes as HTML.
- `to_plain_text(nodes)` renders the nodes as plain text.

Text is written into the HTML exactly as it appears in the input. It is not
escaped.

### Working with the tree

Every node is a dataclass in `memomark.ast`, for example `Paragraph`,
`Heading`, `List`, `Bold`, `Text` or `Tag`. Each node has a `type` (a
`NodeType`) and a `restore()` method that returns its markdown. A `List` also
has a `kind` (a `ListKind`: `ORDERED`, `UNORDERED`, or `DESCRIPTION` for task
lists).

```python
from memomark.ast import Code, Paragraph, Text
from memomark.restore import restore

restore([Paragraph(children=[Text(content="Code: "), Code(content="x")])])
# 'Code: `x`'
```

The helpers `is_block_node`, `is_list_item_node` and
`list_item_kind_and_indent` in `memomark.ast` classify nodes.

### Lower-level pieces

You can also use the parts one at a time:

- `memomark.tokenizer.tokenize` splits text into `Token`s. The same module has
  `stringify`, `split`, `find`, `find_unescaped` and `first_line` for working
  with token lists.
- `memomark.parser.document.parse` (or `parse_block`) builds the block-level
  tree from tokens.
- `memomark.parser.inline.parse_inline` parses inline markup only.
- Each parser class, such as `memomark.parser.blocks.HeadingParser` or
  `memomark.parser.emphasis.BoldParser`, has a `match(tokens)` method. It
  returns a `(node, size)` pair, or `None` if the tokens do not start with
  that construct.
- `memomark.parser.base.parse_block_with_parsers` and
  `parse_inline_with_parsers` run your own list of parsers. They raise
  `memomark.parser.base.ParseError` if none of the parsers accepts the
  remaining tokens.
- `memomark.renderer.html_renderer.HTMLRenderer` and
  `memomark.renderer.text_renderer.StringRenderer` render a tree. Their
  `render(nodes)` returns everything the renderer has produced so far, so use
  a new renderer for each document.

```python
from memomark.parser.document import parse
from memomark.renderer.html_renderer import HTMLRenderer
from memomark.tokenizer import tokenize

html = HTMLRenderer().render(parse(tokenize("* one\n* two")))
# <ul><li>one</li><br><li>two</li></ul>
```

## What it does not do

memomark is a library only. It has no command-line program. It does not read
or write files. HTML elements other than `<br />` are not supported, and
neither are element attributes.

## Running the tests

```
pip install -e ".[test]"
pytest
```