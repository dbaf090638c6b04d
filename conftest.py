import os

# basis data in-memory untuk seluruh tes; harus diset sebelum `database` di-import
os.environ.setdefault("MIRATH_DATABASE_URL", "sqlite://")
