"""Example: styling chat messages and display names with chromamark.

Usage:
    python examples/chat_demo.py
    python examples/chat_demo.py --config examples/chromamark.yaml
"""

import sys
from pathlib import Path

from chromamark import MarkdownPipeline, StyleDescriptor, load_config
from chromamark.render import coalesce_runs, to_ansi

MESSAGES = [
    "**Welcome** to the server, *traveler*!",
    "Rules are at [the wiki](https://example.com/rules) - ||no griefing||",
    "{gold}(Legendary) drop: ~#ff0000,#ffaa00,#ffff55~(Phoenix Feather)",
    "~~old price~~ {green}(new price)",
]


def main() -> None:
    config = None
    if len(sys.argv) == 3 and sys.argv[1] == "--config":
        config = load_config(Path(sys.argv[2]))

    pipeline = MarkdownPipeline(config)
    for message in MESSAGES:
        print(to_ansi(pipeline.parse(message)))

    # Display names start from the host's name style
    name_style = StyleDescriptor(bold=True)
    name = pipeline.parse("~#55ffff,#5555ff~(Steve)", base_style=name_style)
    print(to_ansi(coalesce_runs(name)))


if __name__ == "__main__":
    main()
