# topmark:header:start
#
#   project      : Termplate
#   file         : model.py
#   file_relpath : src/termplate/config/model.py
#   license      : MIT
#   copyright    : (c) 2025 Termplate Authors
#
# topmark:header:end

"""Configuration model and merge policy.

This module defines:
    - `Config`: an immutable runtime snapshot consumed by commands.
    - `MutableConfig`: a mutable builder used while layering sources; it can be
      frozen into `Config` and thawed back for edits.

Merge order (lowest -> highest precedence):
    1) Built-in defaults (`load_defaults_dict`)
    2) User config (``$XDG_CONFIG_HOME/termplate/termplate.toml`` or ``~/.termplate.toml``)
    3) Project config in the working directory (``pyproject.toml`` then ``termplate.toml``)
    4) Extra config files passed explicitly via ``--config`` (in the order provided)
    5) Environment variables (``TERMPLATE_OUTPUT_*``)
    6) CLI arguments

Fields on `MutableConfig` are tri-state (``None`` = inherit), so a layer only
overrides what it actually sets. Invalid values are recorded as diagnostics and
ignored, keeping the lower layer's value.
"""

from __future__ import annotations

import os
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING, Any

from tomlkit.exceptions import ParseError as TomlkitParseError

from termplate.config.getters import (
    get_bool_value_or_none,
    get_string_value_or_none,
    get_table_value,
    parse_bool_token,
)
from termplate.config.keys import Env, Toml
from termplate.config.loaders import (
    discover_project_config_files,
    discover_user_config_file,
    extract_tool_section,
    load_defaults_dict,
    read_toml_dict,
    to_toml,
)
from termplate.config.logging import (
    LOG_FORMAT_TEXT,
    LOG_FORMATS,
    get_logger,
    parse_log_format,
    parse_log_level,
)
from termplate.constants import PYPROJECT_FILE_NAME
from termplate.core.diagnostics import Diagnostic, DiagnosticLevel, DiagnosticLog
from termplate.core.errors import ConfigError
from termplate.output.formats import OutputFormat, TableStyle
from termplate.output.options import RenderOptions

if TYPE_CHECKING:
    from termplate.config.loaders import TomlTable
    from termplate.config.logging import TermplateLogger

# ArgsLike: generic mapping accepted by `apply_cli_args` (CLI namespaces and API dicts).
ArgsLike = Mapping[str, Any]

logger: TermplateLogger = get_logger(__name__)

CLI_OVERRIDE_STR = "<CLI overrides>"
ENV_OVERRIDE_STR = "<environment>"


# ------------------ Immutable runtime config ------------------


@dataclass(frozen=True, slots=True)
class Config:
    """Immutable runtime configuration for Termplate.

    Attributes:
        output_format (OutputFormat): Default output format for rendered data.
        color (bool): Whether console output may use ANSI color.
        pretty (bool): Pretty-print JSON/YAML output.
        quiet (bool): Minimal program output.
        table_style (TableStyle): Drawing style for table output.
        log_level (str): Log level name from ``[logging] level``.
        log_format (str): ``"text"`` or ``"json"`` from ``[logging] format``.
        config_files (tuple[str, ...]): Sources merged into this snapshot, in order.
        diagnostics (tuple[Diagnostic, ...]): Problems found while loading/merging.
    """

    output_format: OutputFormat
    color: bool
    pretty: bool
    quiet: bool
    table_style: TableStyle
    log_level: str
    log_format: str
    config_files: tuple[str, ...] = ()
    diagnostics: tuple[Diagnostic, ...] = ()

    def to_render_options(self) -> RenderOptions:
        """Return the `RenderOptions` for this configuration."""
        return RenderOptions(
            format=self.output_format,
            pretty=self.pretty,
            color=self.color,
            table_style=self.table_style,
        )

    def to_toml_dict(self) -> TomlTable:
        """Return the effective settings as a TOML-compatible dict."""
        return {
            Toml.SECTION_OUTPUT: {
                Toml.KEY_FORMAT: self.output_format.key,
                Toml.KEY_COLOR: self.color,
                Toml.KEY_PRETTY: self.pretty,
                Toml.KEY_QUIET: self.quiet,
                Toml.KEY_TABLE_STYLE: self.table_style.key,
            },
            Toml.SECTION_LOGGING: {
                Toml.KEY_LEVEL: self.log_level,
                Toml.KEY_LOG_FORMAT: self.log_format,
            },
        }

    def to_toml(self) -> str:
        """Render the effective settings as TOML text."""
        return to_toml(self.to_toml_dict())

    def flattened(self) -> dict[str, str]:
        """Return ``section.key -> value`` pairs in schema order (for key/value display)."""
        out: dict[str, str] = {}
        for section, table in self.to_toml_dict().items():
            for key, value in table.items():
                text = str(value).lower() if isinstance(value, bool) else str(value)
                out[f"{section}.{key}"] = text
        return out

    def validate(self) -> None:
        """Raise `ConfigError` if any error-level diagnostics were collected."""
        problems = tuple(d.message for d in self.diagnostics if d.level == DiagnosticLevel.ERROR)
        if problems:
            raise ConfigError(problems)

    def thaw(self) -> MutableConfig:
        """Return a mutable copy of this configuration."""
        return MutableConfig(
            output_format=self.output_format,
            color=self.color,
            pretty=self.pretty,
            quiet=self.quiet,
            table_style=self.table_style,
            log_level=self.log_level,
            log_format=self.log_format,
            config_files=list(self.config_files),
            diagnostics=DiagnosticLog.from_iterable(self.diagnostics),
        )


# ------------------ Mutable builder ------------------


@dataclass
class MutableConfig:
    """Mutable configuration used while layering sources.

    Attributes:
        output_format (OutputFormat | None): None = inherit.
        color (bool | None): None = inherit.
        pretty (bool | None): None = inherit.
        quiet (bool | None): None = inherit.
        table_style (TableStyle | None): None = inherit.
        log_level (str | None): None = inherit.
        log_format (str | None): None = inherit.
        config_files (list[str]): Sources merged so far.
        diagnostics (DiagnosticLog): Problems found so far.
    """

    output_format: OutputFormat | None = None
    color: bool | None = None
    pretty: bool | None = None
    quiet: bool | None = None
    table_style: TableStyle | None = None
    log_level: str | None = None
    log_format: str | None = None

    config_files: list[str] = field(default_factory=lambda: [])
    diagnostics: DiagnosticLog = field(default_factory=DiagnosticLog)

    # ---------------------------- Build/freeze ----------------------------
    def freeze(self) -> Config:
        """Freeze into an immutable `Config`, filling unset fields from the defaults."""
        base: MutableConfig = self
        if None in (
            self.output_format,
            self.color,
            self.pretty,
            self.quiet,
            self.table_style,
            self.log_level,
            self.log_format,
        ):
            base = MutableConfig.from_defaults().merge_with(self)
        return Config(
            output_format=base.output_format or OutputFormat.TEXT,
            color=bool(base.color),
            pretty=bool(base.pretty),
            quiet=bool(base.quiet),
            table_style=base.table_style or TableStyle.ASCII,
            log_level=base.log_level or "critical",
            log_format=base.log_format or LOG_FORMAT_TEXT,
            config_files=tuple(self.config_files),
            diagnostics=tuple(self.diagnostics),
        )

    # --------------------------- Loaders/parsers --------------------------
    @classmethod
    def from_defaults(cls) -> MutableConfig:
        """Return a draft populated with the runtime defaults."""
        draft = cls.from_toml_dict(load_defaults_dict(), source="<defaults>")
        draft.config_files = []
        return draft

    @classmethod
    def from_toml_dict(cls, data: TomlTable, *, source: str) -> MutableConfig:
        """Create a draft from a parsed TOML table.

        Args:
            data (TomlTable): Top-level table holding ``[output]`` and ``[logging]``.
            source (str): Where the data came from; used in diagnostics and provenance.

        Returns:
            MutableConfig: The resulting draft.
        """
        draft = cls(config_files=[source])
        diags = draft.diagnostics

        output_tbl: TomlTable = get_table_value(data, Toml.SECTION_OUTPUT)
        logger.trace("TOML [output] from %s: %s", source, output_tbl)
        logging_tbl: TomlTable = get_table_value(data, Toml.SECTION_LOGGING)
        logger.trace("TOML [logging] from %s: %s", source, logging_tbl)

        draft.output_format = _parse_format(
            get_string_value_or_none(output_tbl, Toml.KEY_FORMAT, where=source, diagnostics=diags),
            where=source,
            diagnostics=diags,
        )
        draft.table_style = _parse_table_style(
            get_string_value_or_none(
                output_tbl, Toml.KEY_TABLE_STYLE, where=source, diagnostics=diags
            ),
            where=source,
            diagnostics=diags,
        )
        draft.color = get_bool_value_or_none(
            output_tbl, Toml.KEY_COLOR, where=source, diagnostics=diags
        )
        draft.pretty = get_bool_value_or_none(
            output_tbl, Toml.KEY_PRETTY, where=source, diagnostics=diags
        )
        draft.quiet = get_bool_value_or_none(
            output_tbl, Toml.KEY_QUIET, where=source, diagnostics=diags
        )
        draft.log_level = _parse_log_level_name(
            get_string_value_or_none(logging_tbl, Toml.KEY_LEVEL, where=source, diagnostics=diags),
            where=source,
            diagnostics=diags,
        )
        draft.log_format = _parse_log_format_name(
            get_string_value_or_none(
                logging_tbl, Toml.KEY_LOG_FORMAT, where=source, diagnostics=diags
            ),
            where=source,
            diagnostics=diags,
        )
        return draft

    @classmethod
    def from_toml_file(cls, path: Path) -> MutableConfig:
        """Load a draft from ``termplate.toml`` or ``[tool.termplate]`` in ``pyproject.toml``.

        Unreadable or malformed files yield an empty draft carrying an error diagnostic.
        """
        logger.debug("Creating MutableConfig from TOML config: %s", path)
        source = str(path)
        try:
            data: TomlTable = read_toml_dict(path)
        except (OSError, TomlkitParseError) as exc:
            logger.error("Cannot load config file %s: %s", path, exc)
            draft = cls(config_files=[source])
            draft.diagnostics.add_error(f"{source}: cannot load config file: {exc}")
            return draft

        if path.name == PYPROJECT_FILE_NAME:
            section: TomlTable | None = extract_tool_section(data)
            if section is None:
                draft = cls(config_files=[source])
                draft.diagnostics.add_warning(f"{source}: no [tool.termplate] section")
                return draft
            data = section

        return cls.from_toml_dict(data, source=source)

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> MutableConfig:
        """Create a draft from ``TERMPLATE_OUTPUT_*`` and ``TERMPLATE_LOG_*`` variables."""
        env: Mapping[str, str] = os.environ if environ is None else environ
        draft = cls()
        diags = draft.diagnostics

        draft.output_format = _parse_format(
            env.get(Env.OUTPUT_FORMAT) or None, where=Env.OUTPUT_FORMAT, diagnostics=diags
        )
        draft.table_style = _parse_table_style(
            env.get(Env.OUTPUT_TABLE_STYLE) or None,
            where=Env.OUTPUT_TABLE_STYLE,
            diagnostics=diags,
        )
        draft.color = parse_bool_token(
            env.get(Env.OUTPUT_COLOR), where=Env.OUTPUT_COLOR, diagnostics=diags
        )
        draft.pretty = parse_bool_token(
            env.get(Env.OUTPUT_PRETTY), where=Env.OUTPUT_PRETTY, diagnostics=diags
        )
        draft.quiet = parse_bool_token(
            env.get(Env.OUTPUT_QUIET), where=Env.OUTPUT_QUIET, diagnostics=diags
        )
        draft.log_level = _parse_log_level_name(
            env.get(Env.LOG_LEVEL) or None, where=Env.LOG_LEVEL, diagnostics=diags
        )
        draft.log_format = _parse_log_format_name(
            env.get(Env.LOG_FORMAT) or None, where=Env.LOG_FORMAT, diagnostics=diags
        )
        if draft.is_set():
            draft.config_files = [ENV_OVERRIDE_STR]
        return draft

    def is_set(self) -> bool:
        """Return True if any setting is explicitly set on this draft."""
        return any(
            v is not None
            for v in (
                self.output_format,
                self.color,
                self.pretty,
                self.quiet,
                self.table_style,
                self.log_level,
                self.log_format,
            )
        )

    @classmethod
    def load_merged(
        cls,
        *,
        cwd: Path | None = None,
        extra_config_files: Iterable[Path] | None = None,
        no_config: bool = False,
        environ: Mapping[str, str] | None = None,
    ) -> MutableConfig:
        """Discover and merge configuration layers into a draft `MutableConfig`.

        Args:
            cwd (Path | None): Directory searched for project config; defaults to CWD.
            extra_config_files (Iterable[Path] | None): Explicit files merged after discovery.
            no_config (bool): If True, skip user and project discovery.
            environ (Mapping[str, str] | None): Environment; defaults to ``os.environ``.

        Returns:
            MutableConfig: A draft ready to receive CLI overrides and be frozen.
        """
        draft: MutableConfig = cls.from_defaults()

        if not no_config:
            user_cfg: Path | None = discover_user_config_file()
            if user_cfg is not None:
                draft = draft.merge_with(cls.from_toml_file(user_cfg))
            for cfg_path in discover_project_config_files(cwd or Path.cwd()):
                draft = draft.merge_with(cls.from_toml_file(cfg_path))

        for extra in extra_config_files or ():
            draft = draft.merge_with(cls.from_toml_file(Path(extra)))

        return draft.merge_with(cls.from_env(environ))

    # ------------------------------- Merging -------------------------------
    def merge_with(self, other: MutableConfig) -> MutableConfig:
        """Return a new draft where values set on ``other`` override this draft."""

        def pick(mine: Any, theirs: Any) -> Any:
            return theirs if theirs is not None else mine

        merged = MutableConfig(
            output_format=pick(self.output_format, other.output_format),
            color=pick(self.color, other.color),
            pretty=pick(self.pretty, other.pretty),
            quiet=pick(self.quiet, other.quiet),
            table_style=pick(self.table_style, other.table_style),
            log_level=pick(self.log_level, other.log_level),
            log_format=pick(self.log_format, other.log_format),
            config_files=self.config_files + other.config_files,
        )
        merged.diagnostics.extend(self.diagnostics)
        merged.diagnostics.extend(other.diagnostics)
        return merged

    def apply_cli_args(self, args: ArgsLike) -> MutableConfig:
        """Apply CLI (or API) overrides in place; ``None`` values are ignored.

        Recognized keys: ``output_format``, ``table_style``, ``pretty``,
        ``color``, ``quiet``.
        """
        logger.debug("Applying CLI arguments to MutableConfig: %s", args)
        applied = False

        fmt = args.get("output_format")
        if fmt is not None:
            self.output_format = _parse_format(
                str(fmt), where="--output", diagnostics=self.diagnostics
            )
            applied = True
        style = args.get("table_style")
        if style is not None:
            self.table_style = _parse_table_style(
                str(style), where="--table-style", diagnostics=self.diagnostics
            )
            applied = True
        for name in ("pretty", "color", "quiet"):
            value = args.get(name)
            if value is not None:
                setattr(self, name, bool(value))
                applied = True

        if applied:
            self.config_files.append(CLI_OVERRIDE_STR)
        return self


# ------------------ Value parsing helpers ------------------


def _parse_format(
    raw: str | None, *, where: str, diagnostics: DiagnosticLog
) -> OutputFormat | None:
    if raw is None:
        return None
    fmt: OutputFormat | None = OutputFormat.parse(raw)
    if fmt is None:
        diagnostics.add_warning(
            f"{where}: invalid output format {raw!r} (valid: {', '.join(OutputFormat.keys())})"
        )
    return fmt


def _parse_table_style(
    raw: str | None, *, where: str, diagnostics: DiagnosticLog
) -> TableStyle | None:
    if raw is None:
        return None
    style: TableStyle | None = TableStyle.parse(raw)
    if style is None:
        diagnostics.add_warning(
            f"{where}: invalid table style {raw!r} (valid: {', '.join(TableStyle.keys())})"
        )
    return style


def _parse_log_level_name(raw: str | None, *, where: str, diagnostics: DiagnosticLog) -> str | None:
    if raw is None:
        return None
    if parse_log_level(raw) is None:
        diagnostics.add_warning(f"{where}: unknown log level {raw!r}")
        return None
    return raw.strip().lower()


def _parse_log_format_name(
    raw: str | None, *, where: str, diagnostics: DiagnosticLog
) -> str | None:
    if raw is None:
        return None
    fmt: str | None = parse_log_format(raw)
    if fmt is None:
        diagnostics.add_warning(
            f"{where}: invalid log format {raw!r} (valid: {', '.join(LOG_FORMATS)})"
        )
    return fmt
