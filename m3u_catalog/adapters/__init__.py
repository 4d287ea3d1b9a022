"""
Couche adaptateurs (infrastructure).

Les adaptateurs implementent les ports definis dans core/ports/ et fournissent
des implementations concretes pour les systemes externes.

Sous-packages :
- cli/ : Interface ligne de commande (Typer + Rich)
- parsing/ : Grammaire des directives #EXTINF et parser de metadonnees
- file_system : Lecture des fichiers de playlist

Chaque adaptateur depend de core/ mais core/ ne depend jamais des adaptateurs.
"""

from m3u_catalog.adapters.file_system import FileLineSource

__all__ = [
    "FileLineSource",
]
