"""Block and inline parsers that turn tokens into syntax tree nodes."""