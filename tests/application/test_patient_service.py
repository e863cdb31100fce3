"""
Test suite for PatientService.

Exercises the directory contract (create, list, lookup, treatment update,
delete) against an in-memory SQLite store, concurrent creates against a
file database, plus error propagation with a mocked store.

System role: Verification of patient service orchestration layer
"""

import asyncio
from datetime import date
from unittest.mock import AsyncMock, MagicMock

import pytest
from sqlalchemy.exc import OperationalError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

from patient_records.application.services.patient_service import PatientService
from patient_records.boundary.db.base import Base
from patient_records.boundary.db.models.patient_model import PatientModel
from patient_records.core.exceptions import ConstraintViolationError
from patient_records.models.patient import CreatePatientRequest, DeleteOutcome


@pytest.fixture
def patient_service(test_async_db: AsyncSession) -> PatientService:
    """Provide PatientService bound to the in-memory database."""
    return PatientService(db=test_async_db)


class TestCreatePatient:
    """Test suite for PatientService.create_patient()."""

    @pytest.mark.asyncio
    async def test_create_should_echo_input_fields(
        self, patient_service: PatientService, patient_request: CreatePatientRequest
    ) -> None:
        """Test created record carries every input field plus an id."""
        # Act
        patient = await patient_service.create_patient(patient_request)

        # Assert
        assert patient.id is not None
        assert patient.nombre == "Ana"
        assert patient.apellido == "Ruiz"
        assert patient.documento == "123"
        assert patient.fecha_nacimiento == date(1990, 1, 1)
        assert patient.tratamiento == "none"

    @pytest.mark.asyncio
    async def test_create_duplicate_should_raise_and_keep_original(
        self, patient_service: PatientService, patient_request: CreatePatientRequest
    ) -> None:
        """Test second create with same documento fails; store keeps the original."""
        # Arrange
        first = await patient_service.create_patient(patient_request)
        first_id = first.id
        duplicate = patient_request.model_copy(update={"nombre": "Beatriz"})

        # Act / Assert
        with pytest.raises(ConstraintViolationError):
            await patient_service.create_patient(duplicate)

        patients = await patient_service.list_patients()
        assert len(patients) == 1
        assert patients[0].id == first_id
        assert patients[0].nombre == "Ana"


class TestListPatients:
    """Test suite for PatientService.list_patients()."""

    @pytest.mark.asyncio
    async def test_list_should_return_empty_on_empty_store(
        self, patient_service: PatientService
    ) -> None:
        """Test empty store yields an empty sequence."""
        assert list(await patient_service.list_patients()) == []

    @pytest.mark.asyncio
    async def test_list_should_return_every_record(
        self, patient_service: PatientService, patient_request: CreatePatientRequest
    ) -> None:
        """Test every created record is listed."""
        # Arrange
        await patient_service.create_patient(patient_request)
        await patient_service.create_patient(
            patient_request.model_copy(update={"documento": "456"})
        )

        # Act
        patients = await patient_service.list_patients()

        # Assert
        assert {p.documento for p in patients} == {"123", "456"}


class TestFindByDocument:
    """Test suite for PatientService.find_by_document()."""

    @pytest.mark.asyncio
    async def test_find_should_return_created_record(
        self, patient_service: PatientService, patient_request: CreatePatientRequest
    ) -> None:
        """Test lookup returns what was created."""
        # Arrange
        created = await patient_service.create_patient(patient_request)

        # Act
        found = await patient_service.find_by_document("123")

        # Assert
        assert found is not None
        assert found.id == created.id
        assert found.apellido == "Ruiz"

    @pytest.mark.asyncio
    async def test_find_should_return_none_for_unknown_document(
        self, patient_service: PatientService
    ) -> None:
        """Test absence is None, not an error."""
        assert await patient_service.find_by_document("999") is None


class TestUpdateTreatment:
    """Test suite for PatientService.update_treatment()."""

    @pytest.mark.asyncio
    async def test_update_should_change_only_treatment(
        self, patient_service: PatientService, patient_request: CreatePatientRequest
    ) -> None:
        """Test only tratamiento changes; other fields stay."""
        # Arrange
        created = await patient_service.create_patient(patient_request)
        before = {
            "id": created.id,
            "nombre": created.nombre,
            "apellido": created.apellido,
            "documento": created.documento,
            "fecha_nacimiento": created.fecha_nacimiento,
        }

        # Act
        updated = await patient_service.update_treatment("123", "insulin")

        # Assert
        assert updated is not None
        assert updated.tratamiento == "insulin"
        assert {key: getattr(updated, key) for key in before} == before

        reloaded = await patient_service.find_by_document("123")
        assert reloaded.tratamiento == "insulin"

    @pytest.mark.asyncio
    async def test_update_unknown_document_should_return_none(
        self, patient_service: PatientService, patient_request: CreatePatientRequest
    ) -> None:
        """Test update on unknown documento returns None and leaves store unchanged."""
        # Arrange
        await patient_service.create_patient(patient_request)

        # Act
        result = await patient_service.update_treatment("999", "insulin")

        # Assert
        assert result is None
        patients = await patient_service.list_patients()
        assert [(p.documento, p.tratamiento) for p in patients] == [("123", "none")]


class TestDeletePatient:
    """Test suite for PatientService.delete_patient()."""

    @pytest.mark.asyncio
    async def test_delete_existing_should_report_deleted(
        self, patient_service: PatientService, patient_request: CreatePatientRequest
    ) -> None:
        """Test delete removes the record and reports DELETED."""
        # Arrange
        await patient_service.create_patient(patient_request)

        # Act
        outcome = await patient_service.delete_patient("123")

        # Assert
        assert outcome is DeleteOutcome.DELETED
        assert outcome.message == "Paciente eliminado"
        assert await patient_service.find_by_document("123") is None

    @pytest.mark.asyncio
    async def test_delete_unknown_should_report_not_found(
        self, patient_service: PatientService, patient_request: CreatePatientRequest
    ) -> None:
        """Test delete on unknown documento reports NOT_FOUND and changes nothing."""
        # Arrange
        await patient_service.create_patient(patient_request)

        # Act
        outcome = await patient_service.delete_patient("999")

        # Assert
        assert outcome is DeleteOutcome.NOT_FOUND
        assert outcome.message == "No existe"
        assert len(await patient_service.list_patients()) == 1


class TestScenario:
    """End-to-end directory scenario."""

    @pytest.mark.asyncio
    async def test_create_update_delete_lookup(
        self, patient_service: PatientService, patient_request: CreatePatientRequest
    ) -> None:
        """Test create → update → delete → lookup returns absence."""
        created = await patient_service.create_patient(patient_request)
        assert created.documento == "123"
        assert created.tratamiento == "none"

        updated = await patient_service.update_treatment("123", "insulin")
        assert updated.tratamiento == "insulin"

        assert await patient_service.delete_patient("123") is DeleteOutcome.DELETED
        assert await patient_service.find_by_document("123") is None


class TestConcurrentCreate:
    """Test suite for simultaneous creates sharing one documento."""

    @pytest.mark.asyncio
    async def test_same_documento_should_have_exactly_one_winner(
        self, tmp_path, patient_request: CreatePatientRequest
    ) -> None:
        """Test the unique index lets one create through and rejects the rest."""
        # Arrange: a file database so every session holds its own connection
        engine = create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'pacientes.db'}")
        async with engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)
        session_factory = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)

        async def create_in_own_session():
            async with session_factory() as session:
                return await PatientService(db=session).create_patient(patient_request)

        try:
            # Act
            results = await asyncio.gather(
                *(create_in_own_session() for _ in range(4)),
                return_exceptions=True,
            )

            # Assert
            created = [r for r in results if isinstance(r, PatientModel)]
            rejected = [r for r in results if isinstance(r, ConstraintViolationError)]
            assert len(created) == 1
            assert len(rejected) == 3
            assert all(e.field == "documento" for e in rejected)

            async with session_factory() as session:
                stored = await PatientService(db=session).list_patients()
            assert [(p.id, p.documento) for p in stored] == [(created[0].id, "123")]
        finally:
            await engine.dispose()


class TestErrorPropagation:
    """Store failures pass through the service unchanged."""

    @pytest.mark.asyncio
    async def test_store_error_should_propagate(self) -> None:
        """Test an arbitrary store error reaches the caller as-is."""
        # Arrange
        error = OperationalError("SELECT", {}, Exception("connection lost"))
        store = MagicMock()
        store.get_by_documento = AsyncMock(side_effect=error)
        service = PatientService(db=AsyncMock(spec=AsyncSession), store=store)

        # Act / Assert
        with pytest.raises(OperationalError) as exc_info:
            await service.find_by_document("123")
        assert exc_info.value is error

    @pytest.mark.asyncio
    async def test_update_should_not_commit_when_absent(self) -> None:
        """Test update on a missing patient performs no write or commit."""
        # Arrange
        db = AsyncMock(spec=AsyncSession)
        store = MagicMock()
        store.get_by_documento = AsyncMock(return_value=None)
        store.save = AsyncMock()
        service = PatientService(db=db, store=store)

        # Act
        result = await service.update_treatment("123", "insulin")

        # Assert
        assert result is None
        store.save.assert_not_called()
        db.commit.assert_not_called()
