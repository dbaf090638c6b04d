# Di dalam file: main.py

import logging

from fastapi import FastAPI, Depends, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy.orm import Session

import calculator
import crud
import models
import schemas
from database import SessionLocal, engine, settings
from logging_utils import configure_logging

configure_logging(settings.log_level_value)
logger = logging.getLogger(__name__)

# Membuat tabel di database (jika belum ada)
models.Base.metadata.create_all(bind=engine)

app = FastAPI(
    title="Mirath - Islamic Inheritance Calculator",
    description="API untuk perhitungan waris Islam (Fara'id): hajb, furudh, ashobah, 'aul dan radd."
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# --- Dependency untuk Sesi Database ---
def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
# -----------------------------------------

@app.get("/")
def read_root():
    return {"message": "Welcome to the Mirath inheritance calculator"}

@app.post("/calculate", response_model=schemas.CalculationResult)
def run_calculation(calculation_data: schemas.CalculationInput):
    """
    Endpoint utama untuk menjalankan perhitungan Fara'id.
    Validasi input (jenis kerabat, jumlah negatif, harta tidak valid) ditangani pydantic → 422.
    """
    result = calculator.calculate_inheritance(calculation_data)
    logger.info(
        "Calculated %d share(s), status=%s, wealth=%.2f",
        len(result.shares), result.status.value, result.total_wealth,
    )
    return result

@app.get("/relatives", response_model=list[schemas.Relative])
def read_relatives(skip: int = 0, limit: int = 100, db: Session = Depends(get_db)):
    return crud.get_relatives(db, skip=skip, limit=limit)

@app.get("/relatives/{key}", response_model=schemas.Relative)
def read_relative(key: schemas.RelativeType, db: Session = Depends(get_db)):
    db_relative = crud.get_relative_by_key(db, key=key.value)
    if db_relative is None:
        raise HTTPException(status_code=404, detail=f"Relative '{key.value}' not found")
    return db_relative

@app.post("/relatives", response_model=schemas.Relative)
def create_relative_endpoint(relative: schemas.RelativeCreate, db: Session = Depends(get_db)):
    """
    Endpoint untuk menambahkan jenis kerabat ke katalog.
    """
    db_relative = crud.get_relative_by_key(db, key=relative.key.value)
    if db_relative:
        raise HTTPException(status_code=400, detail="Relative with this key already exists")
    return crud.create_relative(db=db, relative=relative)


if __name__ == "__main__":
    import uvicorn

    # sama dengan API_URL di populate_db.py
    uvicorn.run("main:app", host="127.0.0.1", port=8000)
