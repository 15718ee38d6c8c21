def read_upload(f) -> str:
    """Text of an uploaded file (Streamlit UploadedFile or any file-like)."""
    if f is None:
        return ""
    # getvalue() survives Streamlit reruns, read() would hit EOF the second time
    data = f.getvalue() if hasattr(f, "getvalue") else f.read()
    if isinstance(data, str):
        return data
    # utf-8-sig drops a leading BOM so it isn't compared as a grapheme
    return data.decode("utf-8-sig", errors="ignore")
