#!/usr/bin/env python
"""
Run the rfc768 CLI from a source checkout without installing it.
"""
import os
import sys

project_root = os.path.dirname(os.path.abspath(__file__))
src_path = os.path.join(project_root, 'src')
if src_path not in sys.path:
    sys.path.insert(0, src_path)

from rfc768_cli.main import cli

if __name__ == "__main__":
    cli()
