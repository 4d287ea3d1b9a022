"""
Couche services applicatifs (cas d'utilisation).

Les services orchestrent la logique du domaine :
- ClassifierService : VOD ou chaine, detection saison/episode
- M3uParser : Assemblage ligne a ligne et API publique de parsing
- NestedPlaylistResolver : Expansion recursive des playlists imbriquees
- CatalogBuilder : Projection des entrees vers le catalogue imbrique

Les services dependent des ports de core/, jamais des implementations
concretes des adaptateurs (injectees par le container).
"""
