"""CLI interface for blog-seo."""

import json
import logging
import sys

import click
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table
from rich.text import Text
from rich import box

from . import __version__
from .analyzer import analyze_seo
from .auditor import audit_url
from .config import Settings
from .models import (
    IssueType,
    PageAudit,
    PostFields,
    SEOAnalysisReport,
    Status,
    URLValidationResult,
)
from .outline import extract_outline
from .preview import build_previews
from .slug import SlugEditor, generate_slug, validate_slug


console = Console()
err_console = Console(stderr=True)

COMMANDS = ["slug", "validate", "analyze", "audit", "outline", "preview"]


def status_style(status: Status | IssueType) -> str:
    """Get Rich style for a check status or issue type."""
    return {
        Status.GOOD: "green",
        Status.WARNING: "yellow",
        Status.ERROR: "red",
        IssueType.ERROR: "red",
        IssueType.WARNING: "yellow",
        IssueType.SUGGESTION: "blue",
    }.get(status, "white")


def status_icon(status: Status | IssueType) -> str:
    """Get icon for a check status or issue type."""
    return {
        Status.GOOD: "✓",
        Status.WARNING: "⚠",
        Status.ERROR: "✗",
        IssueType.ERROR: "✗",
        IssueType.WARNING: "⚠",
        IssueType.SUGGESTION: "ℹ",
    }.get(status, "•")


def score_color(score: float) -> str:
    """Get color for a score value."""
    if score >= 80:
        return "green"
    elif score >= 60:
        return "yellow"
    else:
        return "red"


def print_score_bar(score: int, width: int = 20) -> Text:
    """Create a visual score bar."""
    filled = int((score / 100) * width)
    empty = width - filled
    color = score_color(score)

    bar = Text()
    bar.append("█" * filled, style=color)
    bar.append("░" * empty, style="dim")
    bar.append(f" {score}/100", style=f"bold {color}")
    return bar


def print_report(report: SEOAnalysisReport, verbose: bool = False) -> None:
    """Print an SEO analysis report to the console."""
    console.print()
    console.print("  SEO Score: ", end="")
    console.print(print_score_bar(report.overall_score, width=25))
    console.print(
        f"  Readability: [{score_color(report.readability_score)}]"
        f"{round(report.readability_score)}/100[/]   "
        f"Keyword density: {report.keyword_density:.1f}%"
    )
    console.print()

    table = Table(box=box.SIMPLE, show_header=True, header_style="bold")
    table.add_column("Check", style="cyan")
    table.add_column("Score", justify="right")
    table.add_column("Status")
    if verbose:
        table.add_column("Details")

    for check in report.checks:
        style = status_style(check.status)
        row = [
            check.name,
            f"{check.score}/{check.max_score}",
            f"[{style}]{status_icon(check.status)} {check.status.value}[/]",
        ]
        if verbose:
            row.append(escape(check.message))
        table.add_row(*row)

    console.print(table)

    if not verbose:
        issues = [c for c in report.checks if c.status != Status.GOOD]
        if issues:
            console.print("[bold]Issues Found:[/bold]\n")
            for check in issues:
                style = status_style(check.status)
                console.print(f"  [{style}]{status_icon(check.status)}[/] {escape(check.message)}")
            console.print()


def print_validation(result: URLValidationResult, preview_url: str) -> None:
    """Print a slug validation result to the console."""
    console.print()
    console.print(Panel(
        f"[bold]{escape(preview_url)}[/bold]",
        title="🔗 URL Optimization",
        border_style="blue"
    ))
    console.print()
    console.print("  URL Score: ", end="")
    console.print(print_score_bar(result.score, width=25))
    console.print()

    if result.issues:
        console.print("[bold]Issues:[/bold]\n")
        for issue in result.issues:
            style = status_style(issue.type)
            console.print(f"  [{style}]{status_icon(issue.type)}[/] {escape(issue.message)}")
            if issue.fix:
                console.print(f"    [cyan]→ {escape(issue.fix)}[/cyan]")
        console.print()

    if result.suggestions:
        console.print("[bold]Suggestions:[/bold]\n")
        for i, suggestion in enumerate(result.suggestions, 1):
            console.print(f"  {i}. [cyan]{escape(suggestion)}[/cyan]")
        console.print()


def print_audit(result: PageAudit, verbose: bool = False) -> None:
    console.print()
    console.print(Panel(
        f"[bold]{result.final_url}[/bold]\n"
        f"[dim]Fetched in {result.fetch_time_ms}ms[/dim]",
        title="🔍 Post Audit",
        border_style="blue"
    ))
    print_report(result.report, verbose=verbose)


def read_content(source: str) -> str:
    """Read post HTML from a file path, or stdin when ``source`` is ``-``."""
    with click.open_file(source, "r", encoding="utf-8") as f:
        return f.read()


def emit_json(data) -> None:
    click.echo(json.dumps(data, indent=2))


@click.group(invoke_without_command=True)
@click.option("--debug", is_flag=True, help="Enable debug logging")
@click.pass_context
@click.version_option(version=__version__)
def cli(ctx, debug: bool):
    """Blog SEO - score posts and URL slugs before publishing.

    \b
    Quick start:
        blog-seo slug "My Great Post"
        blog-seo validate my-great-post
        blog-seo analyze post.html --title "My Great Post"

    \b
    Environment:
        BLOG_SEO_SITE_URL, BLOG_SEO_SITE_NAME,
        BLOG_SEO_TIMEOUT, BLOG_SEO_USER_AGENT
    """
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=err_console, show_path=False)],
        force=True,
    )
    try:
        ctx.obj = Settings.from_env()
    except ValueError as e:
        raise click.BadParameter(str(e), param_hint="BLOG_SEO_TIMEOUT")

    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


@cli.command()
@click.argument("title")
def slug(title: str):
    """Generate a URL slug from a post title.

    \b
    Examples:
        blog-seo slug "10 Tips for Better React Hooks"
    """
    click.echo(generate_slug(title))


@cli.command()
@click.argument("slug_text", metavar="SLUG")
@click.option("--json", "json_output", is_flag=True, help="Output as JSON")
@click.pass_obj
def validate(settings: Settings, slug_text: str, json_output: bool):
    """Score a URL slug against SEO best practices.

    \b
    Examples:
        blog-seo validate my-great-post
        blog-seo validate "My--Post!!" --json
    """
    editor = SlugEditor(slug_text, site_url=settings.site_url)
    result = validate_slug(slug_text)

    if json_output:
        emit_json(result.to_dict())
    else:
        print_validation(result, editor.preview_url)

    if not result.is_valid:
        sys.exit(1)


@cli.command()
@click.argument("content", type=click.Path(exists=True, dir_okay=False, allow_dash=True))
@click.option("--title", default="", help="Post title")
@click.option("--seo-title", default="", help="SEO title (defaults to the post title)")
@click.option("--description", default="", help="SEO meta description")
@click.option("-k", "--keyword", default="", help="Focus keyword")
@click.option("--slug", "slug_text", default=None, help="URL slug (defaults to one generated from the title)")
@click.option("-v", "--verbose", is_flag=True, help="Show messages for every check")
@click.option("--json", "json_output", is_flag=True, help="Output as JSON")
def analyze(content: str, title: str, seo_title: str, description: str, keyword: str,
            slug_text: str | None, verbose: bool, json_output: bool):
    """Analyze a post's HTML content for SEO.

    CONTENT is a path to the post body HTML, or - to read stdin.

    \b
    Examples:
        blog-seo analyze post.html --title "React Hooks Guide" -k "react hooks"
        cat post.html | blog-seo analyze - --title "React Hooks Guide" --json
    """
    fields = PostFields(
        title=title,
        content=read_content(content),
        seo_title=seo_title or title,
        seo_description=description,
        focus_keyword=keyword,
        slug=generate_slug(title) if slug_text is None else slug_text,
    )
    report = analyze_seo(fields)

    if json_output:
        emit_json(report.to_dict())
    else:
        print_report(report, verbose=verbose)


@cli.command()
@click.argument("url")
@click.option("-k", "--keyword", default="", help="Focus keyword")
@click.option("-t", "--timeout", default=None, type=float, help="Request timeout in seconds")
@click.option("-v", "--verbose", is_flag=True, help="Show messages for every check")
@click.option("--json", "json_output", is_flag=True, help="Output as JSON")
@click.pass_obj
def audit(settings: Settings, url: str, keyword: str, timeout: float | None,
          verbose: bool, json_output: bool):
    """Fetch a published post and analyze it.

    \b
    Examples:
        blog-seo audit https://example.com/post/my-great-post
        blog-seo audit example.com/post/react-hooks -k "react hooks" --json
    """
    if timeout is not None:
        settings = Settings(
            site_url=settings.site_url,
            site_name=settings.site_name,
            timeout=timeout,
            user_agent=settings.user_agent,
        )

    with console.status(f"[bold blue]Fetching {url}...[/bold blue]"):
        result = audit_url(url, focus_keyword=keyword, settings=settings)

    if result.error:
        err_console.print(f"[red]Error:[/red] {result.error}")
        sys.exit(1)

    if json_output:
        emit_json({
            "url": result.url,
            "final_url": result.final_url,
            "fetch_time_ms": result.fetch_time_ms,
            "slug": result.fields.slug,
            **result.report.to_dict(),
        })
    else:
        print_audit(result, verbose=verbose)


@cli.command()
@click.argument("content", type=click.Path(exists=True, dir_okay=False, allow_dash=True))
@click.option("--json", "json_output", is_flag=True, help="Output as JSON")
def outline(content: str, json_output: bool):
    """Print the table of contents of a post's HTML."""
    headings = extract_outline(read_content(content))

    if json_output:
        emit_json([h.to_dict() for h in headings])
        return

    if not headings:
        console.print("[yellow]No h2-h4 headings found[/yellow]")
        return
    for heading in headings:
        indent = "  " * (heading.level - 2)
        console.print(f"{indent}• {escape(heading.text)} [dim]#{heading.id}[/dim]")


@cli.command()
@click.option("--title", required=True, help="Post title")
@click.option("--description", default="", help="Post description")
@click.option("--url", "post_url", required=True, help="Post URL")
@click.option("--site-name", default=None, help="Site name shown on LinkedIn")
@click.option("--json", "json_output", is_flag=True, help="Output as JSON")
@click.pass_obj
def preview(settings: Settings, title: str, description: str, post_url: str,
            site_name: str | None, json_output: bool):
    """Show how a post link renders on social platforms."""
    previews = build_previews(title, description, post_url, site_name or settings.site_name)

    if json_output:
        emit_json([p.to_dict() for p in previews])
        return

    for card in previews:
        body = f"[dim]{card.hostname}[/dim]\n[bold]{escape(card.title)}[/bold]"
        if card.description:
            body += f"\n{escape(card.description)}"
        if card.site_name:
            body += f"\n[dim]{escape(card.site_name)}[/dim]"
        console.print(Panel(body, title=card.platform.capitalize(), border_style="blue"))


# Convenience: allow `blog-seo URL` as shortcut for `blog-seo audit URL`
def main():
    """Entry point that handles both `blog-seo URL` and `blog-seo audit URL`."""
    args = sys.argv[1:]

    if args and args[0] not in COMMANDS and args[0].startswith(("http://", "https://")):
        sys.argv.insert(1, "audit")

    cli()


if __name__ == "__main__":
    main()
