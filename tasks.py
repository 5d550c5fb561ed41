import os

from invoke import task, Context


IS_CI = os.getenv("GITHUB_ACTIONS") == "true"


@task
def doc(c: Context):
    """Generate documentation"""
    c.run("pdoc -o ./doc geojson_model/", echo=True, pty=True)


@task
def doco(c: Context):
    """Generate documentation and open in browser"""
    from pathlib import Path
    import webbrowser

    doc(c)

    path = Path(__file__).parent / "doc" / "index.html"
    url = f"file://{path}"
    webbrowser.open(url, new=0, autoraise=True)


@task
def fmt(c: Context):
    """Run code formatters"""
    c.run("isort geojson_model test", echo=True, pty=True)
    c.run("ruff format geojson_model test tasks.py", echo=True, pty=True)


@task
def install(c: Context):
    """Install all dependencies"""
    c.run("pip install -e .[test,dev]", echo=True, pty=True)


@task
def lint(c: Context):
    """Run linter and type checker"""
    c.run("ruff check geojson_model/", echo=True, warn=True, pty=True)
    c.run("mypy geojson_model/", echo=True, warn=True, pty=True)
    c.run("slotscheck -m geojson_model --require-subclass", echo=True, warn=True, pty=True)


@task
def test(c: Context):
    """Run all tests in parallel"""
    _pytest(c, cov=not IS_CI)


@task
def test_cov(c: Context):
    """Run all tests in parallel, with coverage report"""
    _pytest(c, cov=True)


def _pytest(c: Context, *, cov: bool):
    cmd = ["pytest", "-vv", "--numprocesses=auto", "--dist=loadgroup"]

    if cov:
        cmd.append("--cov=geojson_model/")

    if cov and IS_CI:
        cmd.append("--cov-report=xml")

    c.run(" ".join(cmd), echo=True, pty=True)

    if cov and not IS_CI:
        c.run("rm .coverage*", echo=True, pty=True)


@task
def test_publish(c: Context):
    """Build the source and wheel distributions of the package"""
    c.run("python -m build", echo=True, pty=True)
