# This file marks the schemas package for API response and request models.
# It exists so schema modules can be imported as one coherent namespace.
# Grouping contracts here helps keep response typing easy to navigate.
