#!/usr/bin/env python3
"""
Resume Studio CLI entry point.

Same commands as the installed `dossier` console script; see dossier/cli.py.

Examples:\n

    resume_studio.py parse resume.tex

    resume_studio.py export resume.tex
"""

from dossier.cli import app

if __name__ == "__main__":
    app()
