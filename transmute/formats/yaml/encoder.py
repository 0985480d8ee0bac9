"""YAML format encoder for Transmute."""

from __future__ import annotations

import yaml

from transmute.config.models import ConversionConfig
from transmute.core.models import Value, nesting_error, to_native
from transmute.formats.registry import DataFormat, FormatRegistry
from transmute.formats.yaml.decoder import NUMBER_RE


class _BlockDumper(yaml.SafeDumper):
    """SafeDumper that indents sequence items under their parent key."""

    def increase_indent(self, flow: bool = False, indentless: bool = False):
        return super().increase_indent(flow, False)


def _represent_str(dumper: yaml.SafeDumper, data: str) -> yaml.ScalarNode:
    # Quote strings the decoder would otherwise read back as numbers
    if NUMBER_RE.fullmatch(data):
        return dumper.represent_scalar("tag:yaml.org,2002:str", data, style="'")
    return dumper.represent_str(data)


_BlockDumper.add_representer(str, _represent_str)


@FormatRegistry.register_encoder(DataFormat.YAML)
class YAMLEncoder:
    """Encoder for block-style YAML.

    Objects render as ``key:`` headers with their content indented two more
    spaces; arrays render as ``- `` items. Any nesting depth is supported.
    Pretty printing has no effect.
    """

    @property
    def format_name(self) -> str:
        return DataFormat.YAML.value

    def encode(self, value: Value, config: ConversionConfig | None = None) -> str:
        """Render a value as block-style YAML.

        Args:
            value: Value to render.
            config: Conversion settings (depth limit).

        Returns:
            YAML text.

        Raises:
            StructuralError: On non-finite numbers or excessive nesting.
        """
        config = config or ConversionConfig()
        data = to_native(value, config.max_depth)

        try:
            return yaml.dump(
                data,
                Dumper=_BlockDumper,
                default_flow_style=False,
                sort_keys=False,
                allow_unicode=True,
                indent=2,
                width=float("inf"),
            )
        except RecursionError as e:
            raise nesting_error(config.max_depth) from e
