"""
Whisker: mustache template compiler

Compiles logic-less mustache templates into an immutable tree of nodes
describing static text and tags. Rendering is left to whoever consumes the
tree: the tree is the whole interface.

Quick Start:
    >>> from whisker import compile_template
    >>> tree = compile_template("<h1>{{header}}</h1>\\n")
    >>> tree.children[1]
    Interpolation(callee=Fetch(path=('header',)), args=(), escaped=True)

Custom delimiters:
    >>> tree = compile_template("<% name %>", delimiters=("<%", "%>"))

Calls with arguments:
    >>> compile_template('{{truncate name count=10 ellipsis="..."}}')

Installation:
    pip install whisker              # Compiler (zero deps)
    pip install whisker[test]        # + pytest and hypothesis
"""

from whisker.config import (
    DEFAULT_DELIMITERS,
    ParseConfig,
    get_parse_config,
    parse_config_context,
    reset_parse_config,
    set_parse_config,
)
from whisker.errors import TemplateSyntaxError, WhiskerError
from whisker.location import SourcePosition, locate
from whisker.nodes import (
    Argument,
    Fetch,
    HashArgs,
    HashValue,
    Interpolation,
    InvertedSection,
    Multi,
    Node,
    Number,
    Partial,
    Section,
    Static,
)
from whisker.parser import Parser
from whisker.serialization import from_dict, from_json, to_dict, to_json, to_tokens
from whisker.utils.logger import get_logger
from whisker.visitor import BaseVisitor, transform

__version__ = "0.1.0"

logger = get_logger(__name__)


def compile_template(
    source: str | bytes,
    *,
    delimiters: tuple[str, str] | None = None,
    source_file: str | None = None,
    encoding: str | None = None,
) -> Multi:
    """Compile a mustache template into a token tree.

    Each call uses a fresh Parser, so delimiter changes inside one template
    never leak into the next compile.

    Args:
        source: Template source; bytes are scanned without decoding
        delimiters: Initial (open, close) pair; defaults to the active
            ParseConfig's pair
        source_file: Optional template file path for error messages
        encoding: Encoding of bytes input (default UTF-8)

    Returns:
        The root Multi node

    Raises:
        TemplateSyntaxError: The template is malformed
        ValueError: ``delimiters`` is not a usable pair

    Example:
        >>> tree = compile_template("{{#items}}{{name}}{{/items}}")
        >>> tree.children[0].raw
        '{{name}}'

    """
    config = get_parse_config()
    if delimiters is not None:
        open_delimiter, close_delimiter = delimiters
        config = ParseConfig(
            open_delimiter=open_delimiter,
            close_delimiter=close_delimiter,
            max_argument_scans=config.max_argument_scans,
        )

    with parse_config_context(config):
        tree = Parser(source, source_file=source_file, encoding=encoding).parse()

    logger.debug(
        "Compiled %s: %d bytes, %d top-level nodes",
        source_file or "<template>",
        len(source),
        len(tree.children),
    )
    return tree


__all__ = [
    # Entry points
    "compile_template",
    "Parser",
    # Nodes
    "Argument",
    "Fetch",
    "HashArgs",
    "HashValue",
    "Interpolation",
    "InvertedSection",
    "Multi",
    "Node",
    "Number",
    "Partial",
    "Section",
    "Static",
    # Errors and positions
    "TemplateSyntaxError",
    "WhiskerError",
    "SourcePosition",
    "locate",
    # Configuration
    "DEFAULT_DELIMITERS",
    "ParseConfig",
    "get_parse_config",
    "parse_config_context",
    "reset_parse_config",
    "set_parse_config",
    # Serialization
    "from_dict",
    "from_json",
    "to_dict",
    "to_json",
    "to_tokens",
    # Traversal
    "BaseVisitor",
    "transform",
    "__version__",
]
