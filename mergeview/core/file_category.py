# mergeview/core/file_category.py
# File name -> display category lookup

from .constants import FileCategory, CODE_EXTENSIONS, DOCUMENT_EXTENSIONS


# * Extension is the lowercased text after the last "."; names w/o a dot use the whole name
def file_extension(file_name: str) -> str:
    return file_name.rsplit(".", 1)[-1].lower()


# * Classify a file as code, document or generic by extension
def classify_file(file_name: str) -> FileCategory:
    ext = file_extension(file_name)
    if ext in CODE_EXTENSIONS:
        return FileCategory.CODE
    if ext in DOCUMENT_EXTENSIONS:
        return FileCategory.DOCUMENT
    return FileCategory.GENERIC
