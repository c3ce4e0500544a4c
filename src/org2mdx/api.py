"""The major exported API functions for Org to MDX conversion."""

#  Copyright (c) 2025 Tom Villani, Ph.D.
# src/org2mdx/api.py
import logging
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, Optional

from org2mdx.blocks import BlockContext, extract_regions, restore_regions
from org2mdx.frontmatter import generate_frontmatter, split_frontmatter
from org2mdx.includes import resolve_includes
from org2mdx.keywords import apply_keyword_defaults, extract_keywords
from org2mdx.options.conversion import ConversionOptions
from org2mdx.options.markdown import MarkdownParserOptions
from org2mdx.options.org import OrgRendererOptions
from org2mdx.parsers.markdown import MarkdownParser
from org2mdx.pipeline import transform_structure
from org2mdx.renderers.org import OrgRenderer
from org2mdx.validation import validate_keywords

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ConversionResult:
    """Output of :func:`convert`.

    Parameters
    ----------
    frontmatter : str
        ``---`` delimited YAML block, including its trailing blank line
    markdown : str
        MDX body

    """

    frontmatter: str
    markdown: str


@dataclass(frozen=True)
class OrgConversionResult:
    """Output of :func:`convert_back`.

    Parameters
    ----------
    keywords : str
        ``#+KEY: value`` lines followed by a blank line, or ``""``
    org : str
        Org body

    """

    keywords: str
    org: str


def _create_options_from_kwargs(options: Optional[ConversionOptions], **kwargs: Any) -> ConversionOptions:
    """Merge keyword overrides into a ConversionOptions instance.

    Unknown names are skipped with a debug message.
    """
    options = options or ConversionOptions()
    if not kwargs:
        return options

    option_names = {field.name for field in fields(ConversionOptions)}
    valid_kwargs = {k: v for k, v in kwargs.items() if k in option_names}
    missing = [k for k in kwargs if k not in valid_kwargs]
    if missing:
        logger.debug(f"Skipping unknown conversion options: {missing}")
    return options.create_updated(**valid_kwargs)


def convert(
    source: str,
    filename: str,
    options: Optional[ConversionOptions] = None,
    schema: Any = None,
    **kwargs: Any,
) -> ConversionResult:
    """Convert Org-mode text into MDX frontmatter and body.

    Parameters
    ----------
    source : str
        Org document text
    filename : str
        Source file name, used for the default title and validation messages
    options : ConversionOptions, optional
        Conversion configuration
    schema : Any, optional
        Frontmatter schema (or schema factory) passed to
        :func:`org2mdx.validation.validate_keywords`
    **kwargs
        Individual ``ConversionOptions`` fields overriding ``options``

    Returns
    -------
    ConversionResult
        Frontmatter and Markdown body

    Raises
    ------
    FrontmatterValidationError
        If ``schema`` rejects the keywords

    Examples
    --------
    >>> result = convert("#+TITLE: Hello\\n\\n* Intro\\nText", "hello.org")
    >>> result.markdown
    '# Intro\\n\\nText'

    """
    options = _create_options_from_kwargs(options, **kwargs)
    text = source.replace("\r\n", "\n")

    keywords = extract_keywords(text, options.skip_keywords)

    if options.resolve_includes:
        text = resolve_includes(text, options.resolved_base_path())

    context = BlockContext()
    text = extract_regions(text, context, options.callout_types)
    logger.debug("Extracted %d protected region(s) from %s", len(context), filename)

    markdown = transform_structure(text, options)
    markdown = restore_regions(markdown, context, options)
    if options.unescape_angle_brackets:
        markdown = markdown.replace("\\<", "<").replace("\\>", ">")

    keywords = apply_keyword_defaults(keywords, filename, options)
    data: Any = keywords
    if schema is not None:
        data = validate_keywords(keywords, schema, {"source": source, "path": filename})

    return ConversionResult(frontmatter=generate_frontmatter(data), markdown=markdown)


def compose_mdx(result: ConversionResult) -> str:
    """Join a conversion result into a single MDX document.

    A non-empty body is followed by exactly one newline.
    """
    if not result.markdown:
        return result.frontmatter
    return f"{result.frontmatter}{result.markdown}\n"


def convert_to_mdx(
    source: str,
    filename: str,
    options: Optional[ConversionOptions] = None,
    schema: Any = None,
    **kwargs: Any,
) -> str:
    """Convert Org-mode text into a complete MDX document string.

    Parameters
    ----------
    source : str
        Org document text
    filename : str
        Source file name
    options : ConversionOptions, optional
        Conversion configuration
    schema : Any, optional
        Frontmatter schema
    **kwargs
        Individual ``ConversionOptions`` fields overriding ``options``

    Returns
    -------
    str
        Frontmatter followed by the MDX body

    """
    return compose_mdx(convert(source, filename, options=options, schema=schema, **kwargs))


def convert_back(
    mdx: str,
    filename: str = "",
    parser_options: Optional[MarkdownParserOptions] = None,
    renderer_options: Optional[OrgRendererOptions] = None,
) -> OrgConversionResult:
    """Convert an MDX document back to Org-mode (best effort, lossy).

    Parameters
    ----------
    mdx : str
        MDX text, optionally starting with YAML frontmatter
    filename : str, optional
        Source name used in log messages
    parser_options : MarkdownParserOptions, optional
        Options for the Markdown parser
    renderer_options : OrgRendererOptions, optional
        Options for the Org renderer

    Returns
    -------
    OrgConversionResult
        Keyword lines and Org body

    Examples
    --------
    >>> result = convert_back("---\\ntitle: Hi\\n---\\n\\n# Intro\\n")
    >>> result.keywords
    '#+TITLE: Hi\\n\\n'
    >>> result.org
    '* Intro\\n\\n'

    """
    frontmatter, body = split_frontmatter(mdx.replace("\r\n", "\n"))
    keyword_lines = "\n".join(f"#+{key.upper()}: {value}" for key, value in frontmatter.items())

    document = MarkdownParser(parser_options).parse(body + "\n")
    org = OrgRenderer(renderer_options).render_to_string(document)
    logger.debug("Converted %s back to Org (%d keyword(s))", filename or "<string>", len(frontmatter))

    return OrgConversionResult(keywords=f"{keyword_lines}\n\n" if keyword_lines else "", org=org)


def convert_file(path: str | Path, options: Optional[ConversionOptions] = None, schema: Any = None) -> ConversionResult:
    """Read an Org file and convert it, resolving includes relative to the file.

    Parameters
    ----------
    path : str or Path
        Org file to read
    options : ConversionOptions, optional
        Conversion configuration; ``base_path`` defaults to the file's directory
    schema : Any, optional
        Frontmatter schema

    Returns
    -------
    ConversionResult
        Frontmatter and Markdown body

    """
    path = Path(path)
    options = options or ConversionOptions()
    if options.base_path is None:
        options = options.create_updated(base_path=path.parent)
    return convert(path.read_text(encoding="utf-8"), path.name, options=options, schema=schema)
