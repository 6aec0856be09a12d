# routers/__init__.py
