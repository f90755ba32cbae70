"""Zip a project directory while honouring its .gitignore rules."""

from project_zipper.archiver import ProjectZipper
from project_zipper.ignore.matcher import PatternMatcher
from project_zipper.models import ZipOptions
from project_zipper.scanner import DirectoryWalker

__version__ = "1.0.0"

__all__ = ["DirectoryWalker", "PatternMatcher", "ProjectZipper", "ZipOptions"]
