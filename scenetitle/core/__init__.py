"""
Couche domaine (core).

Contient les ports (interfaces abstraites) et les objets valeur.
Cette couche n'a AUCUNE dependance vers l'infrastructure (adapters, frameworks).

Sous-packages :
- ports/ : Interfaces abstraites definissant les contrats pour les adaptateurs
- value_objects/ : Objets valeur immutables (MediaInfo, DigitalFormat, DigitalResolution)
"""
