import argparse
import pathlib

import nox


ROOT = pathlib.Path(__file__).resolve().parent

nox.options.sessions = ["lint", "tests"]
nox.options.reuse_existing_virtualenvs = True


@nox.session
def lint(session):
    session.install(".[lint]")

    session.run("black", "--check", "src", "tests", "examples", "noxfile.py")
    session.run("isort", "--check-only", "src", "tests", "examples")
    session.run("flake8", "src", "tests", "examples")
    session.run("mypy", "src")


@nox.session(python=["3.12", "3.11", "3.10", "3.9", "3.8"])
def tests(session):
    session.install(".[test]")

    files = session.posargs or ["tests"]
    session.run("pytest", *files)


@nox.session
def demo(session):
    session.install(".[test]")
    session.run("python", "examples/reporter_demo.py")


@nox.session
def release(session):
    """Build distributions, and upload them if a repository is given.

    Bump ``__version__`` in ``src/dagkit/__init__.py`` and tag beforehand.
    """
    session.install(".[release]")

    parser = argparse.ArgumentParser()
    parser.add_argument(
        "--repo",
        default="",
        help="Repository to upload to. Empty value disables publish.",
    )
    options = parser.parse_args(session.posargs)

    session.run("python", "-m", "build", "--outdir", "dist")
    if not options.repo:
        session.log("Keeping distributions in dist/ since --repo is empty")
        return
    dists = [str(p) for p in ROOT.joinpath("dist").glob("dagkit-*")]
    session.run("twine", "upload", "--repository", options.repo, *dists)
