# --------------------------------------------------------------
# File: 2_Descifrar.py
# Description: Descifra tokens y reconstruye los archivos embebidos desde Streamlit.
# --------------------------------------------------------------

import logging

import streamlit as st

from cryptocodec.codec import data_url_to_file, decrypt, describe_decrypted
from cryptocodec.config import configure_logging, load_settings
from cryptocodec.errors import DecryptionError, ParseError

configure_logging(load_settings())
logger = logging.getLogger(__name__)


st.title("🔓 Descifrar")

passphrase = st.text_input("Passphrase de descifrado", type="password")
token = st.text_area("Datos cifrados", height=180, placeholder="Pega aquí el token cifrado")

if st.button("Descifrar", disabled=not (passphrase and token.strip())):
    try:
        plaintext = decrypt(token.strip(), passphrase)
    except DecryptionError as exc:
        logger.warning("Error al descifrar: %s", exc)
        st.error("No se pudo descifrar: passphrase incorrecta o datos alterados.")
        st.stop()

    result = describe_decrypted(plaintext)
    decoded = None
    if result.is_file:
        try:
            decoded = data_url_to_file(result.data, result.file_name)
        except ParseError as exc:
            logger.warning("Data-URL descifrado inválido, se muestra como texto: %s", exc)

    if decoded is None:
        st.success("Texto descifrado correctamente.")
        st.text_area("Texto descifrado", result.data, height=180)
        st.stop()

    st.success("Archivo descifrado correctamente.")
    st.caption(f"{decoded.mime_type} · {decoded.size / 1024:.2f} KB")
    if decoded.mime_type.startswith("image/"):
        st.image(decoded.data, caption=decoded.filename)
    st.download_button(
        "Descargar archivo",
        decoded.data,
        file_name=decoded.filename,
        mime=decoded.mime_type,
    )
