"""src/liveurl/utils/__init__.py"""
