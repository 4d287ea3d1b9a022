"""
Container d'injection de dependances via dependency-injector.

Fournit une gestion centralisee des dependances pour la CLI et pour les
appelants qui utilisent m3u-catalog comme bibliotheque.
"""

from dependency_injector import containers, providers

from .adapters.file_system import FileLineSource
from .config import Settings
from .services.catalog import CatalogBuilder
from .services.classifier import ClassifierService
from .services.parser import M3uParser


class Container(containers.DeclarativeContainer):
    """Container DI de l'application.

    Utilisation :
        container = Container()
        parser = container.parser()
        entries = parser.parse_file(Path("playlist.m3u"))
    """

    config = providers.Singleton(Settings)

    # Adapters - implementations concretes des ports
    line_source = providers.Singleton(FileLineSource)

    # Services sans etat - Singletons
    classifier = providers.Singleton(ClassifierService)
    catalog_builder = providers.Singleton(CatalogBuilder)

    # Parser - Factory car depend de la configuration courante

    parser = providers.Factory(
        M3uParser,
        line_source=line_source,
        classifier=classifier,
        max_nesting_depth=config.provided.max_nesting_depth,
    )
