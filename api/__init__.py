"""
API HTTP para crumb-core.

Esta capa expone endpoints REST que usan el motor interno (crumb_core.engine)
para calcular recetas y pasos.

La API está diseñada para ser consumida por:
- UI web
- Scripts de automatización
"""
