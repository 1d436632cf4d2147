"""Typings generator -- scaffolds a TypeScript typings repository.

Prompts for a source package on GitHub and a license, writes the project
files from templates, then runs npm, typings and git in the new directory.
"""

__version__ = "0.1.0"
