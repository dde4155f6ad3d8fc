"""Parse Markdown into presentation elements in 3 lines: zero config, zero deps."""

from hana import parse

doc = parse("# Hello **World**\nSome *styled* text  \nand a second line")
for element in doc:
    print(element)
