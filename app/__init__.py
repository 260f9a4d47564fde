"""
UnionEvent demo application.
"""
