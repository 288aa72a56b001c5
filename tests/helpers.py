def form_field(name: str, value: str) -> bytes:
    """Bytes of a plain multipart field as rendered by httpx."""
    return (f'Content-Disposition: form-data; name="{name}"\r\n\r\n{value}\r\n').encode(
        "utf-8"
    )
