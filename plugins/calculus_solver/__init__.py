"""Calculus Solver plugin manifest."""

manifest = {
    "title": "Calculus Solver",
    "summary": "Evaluate expressions, approximate nested integrals, step first-order ODEs and sample curves for plotting.",
    "category": "General Utilities",
    "blueprint": "calculus_solver",
    "icon": "img/GeneralUtilityTools_icon.png",
}

__all__ = ["manifest"]
