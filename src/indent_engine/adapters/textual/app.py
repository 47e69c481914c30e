"""Executable Textual app that hosts the edit engine in a TextArea."""

from __future__ import annotations

import argparse
import os
from typing import Optional, Sequence

try:  # pragma: no cover - imported only when demo is run
    from textual import events
    from textual.app import App, ComposeResult
    from textual.widgets import Footer, Header, Static, TextArea
    from textual.widgets.text_area import Selection as TextSelection
except ModuleNotFoundError as exc:  # pragma: no cover - friendly error for missing dep
    raise RuntimeError(
        "Install the 'textual' package to use indent_engine.adapters.textual.app"
    ) from exc

from indent_engine.buffer import BufferMirror, EditResult, Selection
from indent_engine.config import EngineConfig
from indent_engine.engine import EditEngine

from .controller import TextAreaBridge, TextAreaHooks

SAMPLE_SNIPPET = """const pluckDeep = key => obj => key.split('.').reduce((accum, key) => accum[key], obj)

const compose = (...fns) => res => fns.reduce((accum, next) => next(accum), res)

const unfold = (f, seed) => {
  const go = (f, seed, acc) => {
    return res ? go(f, res[1], acc.concat([res[0]])) : acc
  }
  return go(f, seed, [])
}"""


class EngineTextArea(TextArea):
    """TextArea whose Tab, Enter and ``}`` keys go through the engine."""

    def __init__(self, text: str, *, engine: EditEngine, hooks: TextAreaHooks) -> None:
        super().__init__(text, id="editor", tab_behavior="indent")
        self.bridge = TextAreaBridge(engine, self, hooks)

    def pull_buffer(self) -> BufferMirror:
        start, end = self.selection
        document = self.document
        return BufferMirror(
            text=self.text,
            selection=Selection(
                document.get_index_from_location(start),
                document.get_index_from_location(end),
            ),
        )

    def push_edit(self, result: EditResult) -> None:
        self.replace(result.buffer, (0, 0), self.document.end)
        document = self.document
        self.selection = TextSelection(
            document.get_location_from_index(result.selection.start),
            document.get_location_from_index(result.selection.end),
        )

    async def _on_key(self, event: events.Key) -> None:
        if self.bridge.handle_key(event.key, text=event.character):
            event.stop()
            event.prevent_default()
            return
        await super()._on_key(event)


class IndentEngineApp(App[None]):
    """Minimal Textual UI embedding the edit engine."""

    CSS = """
	Screen {
		layout: vertical;
	}

	#editor {
		height: 1fr;
	}

	#status-line {
		height: 1;
		background: $surface-darken-1;
		padding: 0 1;
	}
	"""

    BINDINGS = [
        ("ctrl+q", "quit", "Quit"),
    ]

    def __init__(self, *, text: str = SAMPLE_SNIPPET, config: EngineConfig | None = None) -> None:
        super().__init__()
        self._text = text
        self.engine = EditEngine(config=config or EngineConfig.from_env())
        self._status_widget: Static | None = None

    def compose(self) -> ComposeResult:
        yield Header()
        yield EngineTextArea(
            self._text,
            engine=self.engine,
            hooks=TextAreaHooks(update_status=self._update_status),
        )
        self._status_widget = Static("", id="status-line")
        yield self._status_widget
        yield Footer()

    def _update_status(self, status: str) -> None:
        if self._status_widget:
            self._status_widget.update(status)


def _parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Run the indent engine Textual demo.")
    parser.add_argument(
        "path",
        nargs="?",
        default=os.environ.get("INDENT_ENGINE_DEMO_FILE"),
        help="Optional file to load instead of the built-in snippet",
    )
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> None:
    args = _parse_args(argv)
    text = SAMPLE_SNIPPET
    if args.path:
        with open(args.path, encoding="utf-8") as handle:
            text = handle.read()
    IndentEngineApp(text=text).run()


if __name__ == "__main__":  # pragma: no cover - manual demo
    main()
