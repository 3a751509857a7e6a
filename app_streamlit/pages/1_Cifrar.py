# --------------------------------------------------------------
# File: 1_Cifrar.py
# Description: Cifra texto o archivos con la passphrase del usuario desde Streamlit.
# --------------------------------------------------------------

import asyncio
import logging

import streamlit as st

from cryptocodec.codec import encrypt, file_to_data_url, hash_sha512
from cryptocodec.config import configure_logging, load_settings
from cryptocodec.password_policy import assess_passphrase

settings = load_settings()
configure_logging(settings)
logger = logging.getLogger(__name__)


def show_results(token: str, digest: str, label: str) -> None:
    """Muestra el token cifrado y el hash SHA-512 con opción de descarga.

    Args:
        token (str): Token devuelto por `encrypt`.
        digest (str): Hash SHA-512 del contenido en claro.
        label (str): Descripción de lo cifrado para el mensaje de éxito.
    """
    st.success(f"{label} cifrado correctamente.")
    st.markdown("### Datos cifrados")
    st.code(token, language=None)
    st.download_button("Descargar token", token, file_name="encrypted.txt", mime="text/plain")
    st.markdown("### Hash SHA-512 del contenido en claro")
    st.code(digest, language=None)


st.title("🔒 Cifrar")

# La passphrase es obligatoria en la interfaz aunque el códec admita la vacía.
passphrase = st.text_input("Passphrase de cifrado", type="password")
st.caption("Recuerda esta passphrase: sin ella no podrás descifrar los datos.")
if passphrase:
    assessment = assess_passphrase(passphrase)
    st.progress(assessment.score / 100, text=f"Robustez: {assessment.score}/100")
    for reason in assessment.reasons:
        st.caption(f"• {reason}")

tab_text, tab_file = st.tabs(["Texto", "Archivo"])

with tab_text:
    plaintext = st.text_area("Texto a cifrar", height=180)
    if st.button("Cifrar texto", disabled=not (plaintext and passphrase)):
        token = encrypt(plaintext, passphrase)
        show_results(token, hash_sha512(plaintext), "Texto")
        logger.info("Texto cifrado (%d caracteres)", len(plaintext))

with tab_file:
    uploaded = st.file_uploader(
        f"Selecciona una imagen o CSV (máx. {settings.max_file_mb} MB)",
        type=["png", "jpg", "jpeg", "gif", "csv", "xlsx"],
    )
    if uploaded is not None:
        st.caption(f"{uploaded.type or 'tipo desconocido'} · {uploaded.size / 1024:.2f} KB")
        if uploaded.type and uploaded.type.startswith("image/"):
            st.image(uploaded.getvalue(), caption=uploaded.name)

    if st.button("Cifrar archivo", disabled=not (uploaded and passphrase)):
        if uploaded.size > settings.max_file_bytes:
            st.error(f"El archivo supera el límite de {settings.max_file_mb} MB.")
            st.stop()
        uploaded.seek(0)
        data_url = asyncio.run(file_to_data_url(uploaded))
        token = encrypt(data_url, passphrase)
        show_results(token, hash_sha512(data_url), f'Archivo "{uploaded.name}"')
        logger.info("Archivo cifrado: %s (%d bytes)", uploaded.name, uploaded.size)

st.info(
    "Demostración educativa de cifrado y hashing. En un entorno sanitario real harían "
    "falta gestión segura de claves y almacenamiento conforme a la normativa."
)
