# page_scout/parser/__init__.py
"""Разбор HTML и обход дерева разметки."""
