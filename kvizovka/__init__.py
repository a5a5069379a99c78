"""Kvízovka: pravidlá, skórovanie a taška pre srbskú slovnú hru na doske 17×17."""

__version__ = "0.1.0"
