#!/usr/bin/env python3
"""
Script helper para ejecutar la API FastAPI.
Ejecuta desde la raíz del proyecto para asegurar que Python encuentre el módulo 'api'.
"""

import sys

import uvicorn

if __name__ == "__main__":
    print("🚀 Iniciando API FastAPI en http://localhost:8000")
    print("📖 Documentación disponible en http://localhost:8000/docs")
    try:
        uvicorn.run("api.main:app", host="0.0.0.0", port=8000, reload=True)
    except Exception as e:
        print(f"❌ Error al iniciar el servidor: {e}")
        sys.exit(1)
