"""
Couche domaine (core).

Contient les entites, ports (interfaces abstraites), objets valeur et exceptions.
Cette couche n'a AUCUNE dependance vers l'infrastructure (adapters, CLI).

Sous-packages :
- entities/ : Entrees de playlist et objets du catalogue
- ports/ : Interfaces abstraites definissant les contrats pour les adaptateurs
- value_objects/ : Objets valeur immutables (MediaLocation, Metadata, Directive)
"""
