"""Script para insertar las materias iniciales en la tabla subjects."""
import asyncio
import sys
from pathlib import Path

# Asegurar que el proyecto esté en el path
sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from sqlalchemy import select

from petition_api.core.config import Settings, settings
from petition_api.core.database import build_engine, build_sessionmaker, init_db
from petition_api.models import Subject


SUBJECTS = [
    "Algebra",
    "Calculo I",
    "Calculo II",
    "Fisica I",
    "Fisica II",
    "Quimica Aplicada",
    "Programacion I",
    "Programacion II",
    "Estadistica",
]


async def seed_subjects(names: list[str] | None = None, config: Settings = settings) -> int:
    """Inserta las materias que falten; devuelve cuántas se crearon."""
    if names is None:
        names = SUBJECTS
    engine = build_engine(config)
    await init_db(engine)
    creadas = 0
    async with build_sessionmaker(engine)() as session:
        for nombre in names:
            nombre = nombre.strip()
            if not nombre:
                continue
            result = await session.execute(select(Subject).where(Subject.subject_name == nombre))
            if result.scalar_one_or_none() is None:
                session.add(Subject(subject_name=nombre))
                creadas += 1
                print(f"  + {nombre}")
            else:
                print(f"  = {nombre} (ya existe)")
        await session.commit()
    await engine.dispose()
    print("Listo.")
    return creadas


if __name__ == "__main__":
    asyncio.run(seed_subjects())
