"""기본 CRUD 레포지토리 — 모든 레포지토리의 부모 클래스.

Base CRUD Repository — Parent class for all domain repositories.
Provides generic lookup, create, bulk insert, delete and existence checks.

Usage:
    class BrandRepository(BaseRepository[Brand]):
        def __init__(self) -> None:
            super().__init__(Brand)
"""

from typing import Any, Generic, TypeVar

from sqlalchemy import Select, func, insert, select
from sqlalchemy.ext.asyncio import AsyncSession

from shoestrade.database import Base

# 제네릭 타입 변수 — SQLAlchemy 모델을 나타냄
# Generic type variable representing a SQLAlchemy model
ModelType = TypeVar("ModelType", bound=Base)


class BaseRepository(Generic[ModelType]):
    """제네릭 CRUD 레포지토리.

    Generic CRUD repository providing common database operations.
    Lookups by id return None and deletes return False when no row exists;
    services translate those empty results into domain errors.

    Attributes:
        model: SQLAlchemy 모델 클래스 (The SQLAlchemy model class)
    """

    def __init__(self, model: type[ModelType]) -> None:
        self.model: type[ModelType] = model

    async def get_by_id(
        self,
        db: AsyncSession,
        record_id: int,
    ) -> ModelType | None:
        """ID로 단일 레코드를 조회합니다.

        Retrieve a single record by its primary key.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            record_id: 조회할 레코드 ID (Identifier of the record)

        Returns:
            ModelType | None: 조회된 레코드 또는 None (Found record or None)
        """
        query: Select = select(self.model).where(self.model.id == record_id)
        result = await db.execute(query)
        return result.scalar_one_or_none()

    async def create(
        self,
        db: AsyncSession,
        obj_data: dict[str, Any],
    ) -> ModelType:
        """새 레코드를 생성합니다.

        Create a new record and flush it so its id is available.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            obj_data: 생성할 레코드의 데이터 딕셔너리 (Column values of the new record)

        Returns:
            ModelType: 생성된 레코드 (The created record)
        """
        db_obj: ModelType = self.model(**obj_data)
        db.add(db_obj)
        await db.flush()
        await db.refresh(db_obj)
        return db_obj

    async def bulk_create(
        self,
        db: AsyncSession,
        rows: list[dict[str, Any]],
    ) -> None:
        """여러 레코드를 한 번의 INSERT로 저장합니다.

        Insert many rows with a single executemany INSERT. Identity map objects
        are not created; reload through a finder if they are needed.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            rows: 컬럼 값 딕셔너리 목록 (Column value dicts, one per row)
        """
        if not rows:
            return
        await db.execute(insert(self.model), rows)

    async def delete(
        self,
        db: AsyncSession,
        record_id: int,
    ) -> bool:
        """레코드를 삭제합니다.

        Delete a record by id, cascading through ORM relationships.

        Returns:
            bool: 삭제 여부, 레코드가 없으면 False (False when no row existed)
        """
        db_obj: ModelType | None = await self.get_by_id(db, record_id)
        if db_obj is None:
            return False

        await db.delete(db_obj)
        await db.flush()
        return True

    async def exists(
        self,
        db: AsyncSession,
        filters: dict[str, Any],
    ) -> bool:
        """주어진 조건에 일치하는 레코드가 존재하는지 확인합니다.

        Check if a record matching the given equality filters exists.
        """
        query: Select = select(func.count()).select_from(self.model)
        for column_name, value in filters.items():
            if hasattr(self.model, column_name):
                query = query.where(getattr(self.model, column_name) == value)

        count: int = (await db.execute(query)).scalar() or 0
        return count > 0
