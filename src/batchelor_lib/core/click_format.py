# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab


import click
from click_help_colors import HelpColorsCommand


class VariadicHelpColorsCommand(HelpColorsCommand):
    """
    Colored command supporting options that consume several values.

    Click options take a fixed number of values. Before parsing, the values
    following a variadic option are rewritten into repeated `--option=value`
    arguments so that the option can be declared with `multiple=True`.

    Attributes:
        variadic_options (tuple[str, ...]): Options consuming all following values
            up to the next option.
        trailing_options (tuple[str, ...]): Options consuming every following argument,
            including arguments that look like options.
        raw_value_options (tuple[str, ...]): Options taking exactly one value,
            even if that value looks like an option.
    """

    variadic_options: tuple[str, ...] = ()
    trailing_options: tuple[str, ...] = ()
    raw_value_options: tuple[str, ...] = ()

    def parse_args(self, ctx: click.Context, args: list[str]) -> list[str]:
        return super().parse_args(ctx, self.normalizeArgs(args))

    def normalizeArgs(self, args: list[str]) -> list[str]:
        """
        Rewrite variadic and trailing options into repeated `--option=value` arguments.

        Args:
            args (list[str]): Raw command-line arguments.

        Returns:
            list[str]: Arguments understood by the standard click parser.
        """
        normalized = []
        i = 0
        while i < len(args):
            arg = args[i]
            name, has_value, value = arg.partition("=")

            # everything after `--` is left for click
            if arg == "--":
                normalized.extend(args[i:])
                break

            if name in self.trailing_options:
                values = ([value] if has_value else []) + args[i + 1 :]
                normalized.extend(f"{name}={v}" for v in values)
                break

            if name in self.variadic_options:
                values = [value] if has_value else []
                i += 1
                while i < len(args) and not _looks_like_option(args[i]):
                    values.append(args[i])
                    i += 1

                if not values:
                    # let click report the missing value
                    normalized.append(name)
                normalized.extend(f"{name}={v}" for v in values)
                continue

            if arg in self.raw_value_options and i + 1 < len(args):
                normalized.append(f"{arg}={args[i + 1]}")
                i += 2
                continue

            normalized.append(arg)
            i += 1

        return normalized


def _looks_like_option(arg: str) -> bool:
    """Return True if the argument starts a new option."""
    return arg.startswith("-") and len(arg) > 1
