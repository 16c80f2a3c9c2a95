"""
SQLAlchemy implementation of the MBTIRepository interface.
"""

from sqlalchemy import select

from questionnaire_api.domain.entities.mbti import (
    Dimension,
    Direction,
    MBTIQuestion,
    MBTIType,
    UserMBTI,
)
from questionnaire_api.domain.repositories.mbti_repository import MBTIRepository
from questionnaire_api.infrastructure.persistence.sqlalchemy.models.mbti import (
    MBTIQuestionModel,
    MBTITypeModel,
    UserMBTIModel,
)
from questionnaire_api.infrastructure.persistence.sqlalchemy.repositories.base_repository import (
    BaseSQLAlchemyRepository,
)


class SQLAlchemyMBTIRepository(BaseSQLAlchemyRepository, MBTIRepository):
    async def list_questions(self) -> list[MBTIQuestion]:
        async with self._transaction() as session:
            result = await session.execute(
                select(MBTIQuestionModel).order_by(MBTIQuestionModel.question_id)
            )
            return [
                MBTIQuestion(
                    question_id=m.question_id,
                    question_text=m.question_text,
                    dimension=Dimension(m.dimension),
                    direction=Direction(m.direction),
                )
                for m in result.scalars().all()
            ]

    async def get_type(self, type_name: str) -> MBTIType | None:
        async with self._transaction() as session:
            result = await session.execute(
                select(MBTITypeModel).where(MBTITypeModel.type_name == type_name)
            )
            model = result.scalar_one_or_none()
            if model is None:
                return None
            return MBTIType(
                type_id=model.type_id, type_name=model.type_name, description=model.description
            )

    async def assign_type(self, user_id: int, mbti_type: MBTIType) -> UserMBTI:
        async with self._transaction() as session:
            model = UserMBTIModel(user_id=user_id, type_id=mbti_type.type_id)
            session.add(model)
            await session.flush()
            return UserMBTI(
                user_id=user_id,
                type_name=mbti_type.type_name,
                description=mbti_type.description,
                assigned_at=model.assigned_at,
            )

    async def get_latest_for_user(self, user_id: int) -> UserMBTI | None:
        query = (
            select(UserMBTIModel.user_id, MBTITypeModel.type_name, MBTITypeModel.description,
                   UserMBTIModel.assigned_at)
            .join(MBTITypeModel, MBTITypeModel.type_id == UserMBTIModel.type_id)
            .where(UserMBTIModel.user_id == user_id)
            .order_by(UserMBTIModel.assigned_at.desc(), UserMBTIModel.user_mbti_id.desc())
            .limit(1)
        )
        async with self._transaction() as session:
            row = (await session.execute(query)).first()
            if row is None:
                return None
            return UserMBTI(
                user_id=row.user_id,
                type_name=row.type_name,
                description=row.description,
                assigned_at=row.assigned_at,
            )
