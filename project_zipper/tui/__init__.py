from project_zipper.tui.renderers import ZipperConsoleUI

__all__ = ["ZipperConsoleUI"]
