"""
Package des collecteurs de l'inventaire logiciel

Ce package contient :
- Les classes de base (collecteur, source d'inventaire)
- Le collecteur de logiciels installés
- Les sources spécifiques par plateforme
"""
