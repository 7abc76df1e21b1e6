"""
msgshell.interfaces - User-facing surfaces for msgshell
"""
