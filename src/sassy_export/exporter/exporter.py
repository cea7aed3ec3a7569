"""
exporter.py
High-level export entry point.

This module provides the stable API used by the CLI and by callers that
build SassMaps themselves:

    export(path, data, pretty, debug, use_env_root) -> status message

Argument checking, path resolution and the final message live here. JSON
text construction and file writing are delegated to json_exporter.
"""

from __future__ import annotations

from logging import Logger
from pathlib import Path
from typing import Any, Optional

from sassy_export.config import get_config
from sassy_export.converter import ValueConverter
from sassy_export.core.context import ExportRequest
from sassy_export.core.validation import assert_type, to_bool, to_text
from sassy_export.logging import get_logger
from sassy_export.utils.pathing import WorkingDirectory, resolve_output_path, split_name

from .json_exporter import (
    JS_EXTENSION,
    JSON_EXTENSION,
    ensure_parent_dir,
    serialize_json,
    wrap_javascript,
    write_text,
)

log = get_logger("exporter")


def build_request(
    path: Any,
    data: Any,
    pretty: Any = False,
    debug: Any = False,
    use_env_root: Any = False,
) -> ExportRequest:
    """
    Check the five export arguments and fold them into an ExportRequest.

    Raises ArgumentTypeError (a TypeError) on the first mismatch.
    """
    assert_type(path, "String", "path")
    assert_type(data, "Map", "map")
    assert_type(pretty, "Bool", "pretty")
    assert_type(debug, "Bool", "debug")
    assert_type(use_env_root, "Bool", "use_env")

    return ExportRequest(
        output_path=to_text(path),
        data=data,
        pretty=to_bool(pretty),
        debug=to_bool(debug),
        use_env_root=to_bool(use_env_root),
    )


def status_message(ext: str, output_path: Path) -> str:
    kind = "JSON" if ext == JSON_EXTENSION else "JavaScript"
    return f"{kind} was successfully exported to {output_path}"


class Exporter:
    """
    Writes ExportRequests to disk.

    The working directories, converter settings and logger are injected so
    that nothing here reads process-global state on its own.
    """

    def __init__(
        self,
        workdir: Optional[WorkingDirectory] = None,
        *,
        max_depth: Optional[int] = None,
        indent: Optional[int] = None,
        encoding: Optional[str] = None,
        unix_newlines: Optional[bool] = None,
        logger: Optional[Logger] = None,
    ):
        settings = get_config().export

        self.workdir = workdir or WorkingDirectory.from_process()
        self.converter = ValueConverter(
            max_depth=settings["max_depth"] if max_depth is None else max_depth
        )
        self.indent = int(settings["indent"] if indent is None else indent)
        self.encoding = settings["encoding"] if encoding is None else encoding
        self.unix_newlines = bool(
            settings["unix_newlines"] if unix_newlines is None else unix_newlines
        )
        self.log = logger or log

    def resolve(self, request: ExportRequest) -> Path:
        root = self.workdir.root(request.use_env_root)
        return resolve_output_path(root, request.output_path)

    def render(self, request: ExportRequest) -> str:
        """Return the exact file content for *request* without writing it."""
        filename, ext = split_name(request.output_path)

        tree = self.converter.convert(request.data)
        text = serialize_json(tree, pretty=request.pretty, indent=self.indent)

        # .js targets become an assignable statement
        if ext == JS_EXTENSION:
            text = wrap_javascript(text, filename)
        return text

    def run(self, request: ExportRequest) -> str:
        output_path = self.resolve(request)
        _, ext = split_name(request.output_path)

        text = self.render(request)

        if ensure_parent_dir(output_path):
            self.log.info(
                "Directory was not found. Created new directory: %s",
                output_path.parent,
            )

        write_text(
            output_path,
            text,
            encoding=self.encoding,
            unix_newlines=self.unix_newlines,
        )

        message = status_message(ext, output_path)
        if request.debug:
            self.log.info(message)
        return message

    def export(
        self,
        path: Any,
        data: Any,
        pretty: Any = False,
        debug: Any = False,
        use_env_root: Any = False,
    ) -> str:
        return self.run(build_request(path, data, pretty, debug, use_env_root))


def export(
    path: Any,
    data: Any,
    pretty: Any = False,
    debug: Any = False,
    use_env_root: Any = False,
) -> str:
    """
    Export *data* (a SassMap) as JSON to *path* below the working directory.

    - .json targets get plain JSON text
    - .js targets get ``var <filename> = <json>``
    - missing parent directories are created

    Returns the status message, e.g.
    "JSON was successfully exported to /project/out/data.json".
    """
    request = build_request(path, data, pretty, debug, use_env_root)
    return Exporter().run(request)
