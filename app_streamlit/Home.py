# --------------------------------------------------------------
# File: Home.py
# Description: Define la página principal de Streamlit con el resumen del flujo.
# --------------------------------------------------------------

import streamlit as st

from cryptocodec.config import configure_logging, load_settings

configure_logging(load_settings())

# Configura los metadatos de la página principal de la aplicación.
st.set_page_config(page_title="MedCrypt", page_icon="🔐", layout="centered")

# Presenta el nombre del producto y su propósito general.
st.title("🔐 MedCrypt")
st.write(
    "Herramienta de demostración para cifrar texto o archivos pequeños (imágenes, CSV) "
    "con AES-256-GCM y una clave derivada de tu passphrase con Argon2id, junto con el "
    "hash SHA-512 del contenido en claro."
)
st.markdown(
    "- **Cifrar**: introduce una passphrase y un texto o archivo; obtendrás un token "
    "imprimible y su hash.\n"
    "- **Descifrar**: pega el token y la misma passphrase para recuperar el original."
)
st.warning(
    "Uso educativo. No incluye gestión de claves, control de acceso ni garantías de "
    "cumplimiento normativo. Si pierdes la passphrase, los datos no se pueden recuperar."
)
