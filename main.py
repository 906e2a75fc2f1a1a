#!/usr/bin/env python3
"""
EML Compiler - EML 마크업을 CSS class/style이 적용된 render tree로 변환
사용법: python main.py [--config 설정.yaml] [--stylesheet out.css] [파일]
예시: python main.py --config config.yaml page.eml
"""
import logging
import sys
from typing import Optional

import click

from eml_compiler import EMLCompiler, EMLError, flexbox_stylesheet, load_config
from eml_compiler.dom import print_tree


def setup_logging(debug: bool = False) -> logging.Logger:
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )
    return logging.getLogger("eml_compiler")


@click.command()
@click.argument("source", required=False, type=click.Path(exists=True, dir_okay=False))
@click.option("--config", "config_path", type=click.Path(exists=True, dir_okay=False),
              help="YAML config (valid_tags, passthrough_attributes, trace_file)")
@click.option("--stylesheet", "stylesheet_path", type=click.Path(dir_okay=False),
              help="Write the flexbox companion stylesheet to this file")
@click.option("--debug", is_flag=True, help="Enable debug output")
def main(source: Optional[str], config_path: Optional[str],
         stylesheet_path: Optional[str], debug: bool) -> None:
    """Compile an EML file and print the render tree."""
    logger = setup_logging(debug)

    if stylesheet_path:
        with open(stylesheet_path, "w", encoding="utf-8") as f:
            f.write(flexbox_stylesheet())
        logger.info("Stylesheet written to %s", stylesheet_path)

    if source is None:
        if not stylesheet_path:
            raise click.UsageError("SOURCE is required unless --stylesheet is given")
        return

    config = load_config(config_path) if config_path else None
    with open(source, encoding="utf-8") as f:
        markup = f.read()

    compiler = EMLCompiler(config)
    try:
        tree = compiler.compile(markup)
    except EMLError as e:
        logger.error("compilation failed: %s", e)
        sys.exit(1)
    finally:
        compiler.close()

    click.echo(tree.markup)
    for node in tree.children:
        print_tree(node)


if __name__ == "__main__":
    main()
