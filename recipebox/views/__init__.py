"""
Views Package - The 'V' in MVC

The API itself returns JSON; the only server-rendered views are the
printable pages for a scaled recipe and a shopping list. They are plain
HTML documents meant to be opened in a new tab and printed.
"""

from recipebox.views.printable import render_scaled_recipe, render_shopping_list

__all__ = ["render_scaled_recipe", "render_shopping_list"]
