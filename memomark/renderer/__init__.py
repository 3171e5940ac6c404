"""Renderers that turn syntax tree nodes into HTML or plain text."""