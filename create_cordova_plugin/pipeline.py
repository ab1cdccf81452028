"""create-cordova-plugin command-line entry point.

Collects the plugin information interactively, then generates the plugin
directory under the current working directory.

Usage::

    create-cordova-plugin
    python -m create_cordova_plugin
"""

from __future__ import annotations

import asyncio
import sys
from typing import Optional

from .config import GeneratorConfig
from .models import AnswerSet
from .prompts import PromptCancelledError, gather_plugin_info
from .scaffolder import GenerationResult, PluginGenerator
from .utils import print_error, print_success, print_summary_table, print_warning


async def create_plugin(answers: AnswerSet, config: GeneratorConfig) -> GenerationResult:
    """Generate the plugin described by *answers* and report the result."""
    if not answers.platforms:
        print_warning("No platform selected: only the manifest, plugin.xml and frontend API are generated.")

    result = await PluginGenerator(answers, config).generate()

    print_summary_table(
        {str(path.relative_to(result.plugin_dir)): "written" for path in result.files},
        title=answers.id,
    )
    print_success(f"Cordova plugin was successfully created at: {result.plugin_dir}")
    return result


# ---------------------------------------------------------------------------
# CLI entry point
# ---------------------------------------------------------------------------


def main(argv: Optional[list[str]] = None) -> None:
    """CLI entry point for ``create-cordova-plugin``."""
    import argparse

    parser = argparse.ArgumentParser(
        prog="create-cordova-plugin",
        description="Interactively scaffold a new Cordova plugin in the current directory",
        epilog=(
            "Environment:\n"
            "  CORDOVA_PLUGIN_ROOT_DIR      directory to create the plugin in (default: cwd)\n"
            "  CORDOVA_PLUGIN_TEMPLATE_DIR  alternative template directory\n"
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.parse_args(argv)

    config = GeneratorConfig.from_env()

    try:
        answers = gather_plugin_info()
    except PromptCancelledError:
        print_error("Cordova Plugin initializer tool was stopped.")
        sys.exit(1)
    except Exception as exc:
        print_error(f"Error: {exc}")
        sys.exit(1)

    try:
        asyncio.run(create_plugin(answers, config))
    except Exception as exc:
        print_error(f"Error: {exc}")
        sys.exit(1)


if __name__ == "__main__":
    main()
