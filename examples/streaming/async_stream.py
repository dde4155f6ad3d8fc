"""Parse Markdown as lines arrive: the only wait is for the next line."""

import asyncio

from hana import parse_async


async def main() -> None:
    reader = asyncio.StreamReader()
    reader.feed_data(b"# Streamed\n\nLines arrive one at a time.\n```python\nprint('hi')\n")
    reader.feed_eof()

    # The fence is never closed; it becomes a code block at end of stream
    doc = await parse_async(reader, style="style.toml")
    for element in doc:
        print(element)


asyncio.run(main())
