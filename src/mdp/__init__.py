"""mdp - parse diary markdown files into token trees and query them."""

__version__ = "0.1.0"
