"""
测试 ProcedureExecutor 的结果集读取、连接释放与错误转换
"""
import pymysql
import pytest
from sqlalchemy.exc import OperationalError

from app.db.procedures import ProcedureExecutor, first_row, raise_for_status
from app.infrastructure.exceptions import DatabaseConnectionError, ProcedureError
from app.tests.fakes import FakeConnection, FakeCursor, FakeEngine, status_row


def _executor(result_sets, error=None):
    cursor = FakeCursor(result_sets, error=error)
    connection = FakeConnection(cursor)
    return ProcedureExecutor(engine=FakeEngine(connection)), connection, cursor


def test_call_returns_first_result_set_as_dicts():
    executor, connection, cursor = _executor([
        (["ClienteId", "Nombre"], [(1, "Ana"), (2, "Luis")]),
        (None, []),
    ])

    rows = executor.call("SP_Clientes_Listar")

    assert rows == [{"ClienteId": 1, "Nombre": "Ana"}, {"ClienteId": 2, "Nombre": "Luis"}]
    assert cursor.callproc_args == ("SP_Clientes_Listar", [])
    assert cursor.closed
    assert connection.committed
    assert connection.closed


def test_call_multi_keeps_result_set_order():
    executor, _, _ = _executor([
        (["OrdenId"], [(7,)]),
        (["DetalleOrdenId"], [(3,), (1,), (2,)]),
        (None, []),
    ])

    result_sets = executor.call_multi("SP_Ordenes_Crear", [1, "[]"])

    assert result_sets == [
        [{"OrdenId": 7}],
        [{"DetalleOrdenId": 3}, {"DetalleOrdenId": 1}, {"DetalleOrdenId": 2}],
    ]


def test_call_passes_parameters_positionally():
    executor, _, cursor = _executor([(["ClienteId"], [(5,)])])

    executor.call("SP_Cliente_Buscar", (5,))

    assert cursor.callproc_args == ("SP_Cliente_Buscar", [5])


def test_call_without_result_sets_returns_empty_list():
    executor, connection, _ = _executor([(None, [])])

    assert executor.call("SP_Clientes_Listar") == []
    assert connection.closed


def test_driver_error_is_wrapped_and_connection_released():
    executor, connection, _ = _executor([], error=pymysql.err.OperationalError(2013, "Lost connection"))

    with pytest.raises(DatabaseConnectionError) as exc_info:
        executor.call("SP_Clientes_Listar")

    assert "Lost connection" in str(exc_info.value)
    assert connection.closed
    assert not connection.committed


def test_connect_failure_is_wrapped():
    engine = FakeEngine(connect_error=OperationalError("connect", {}, Exception("Can't connect to MySQL server")))
    executor = ProcedureExecutor(engine=engine)

    with pytest.raises(DatabaseConnectionError):
        executor.call("SP_Clientes_Listar")


def test_executor_requires_uri_or_engine():
    with pytest.raises(ValueError):
        ProcedureExecutor()


def test_raise_for_status_builds_structured_failure():
    with pytest.raises(ProcedureError) as exc_info:
        raise_for_status(status_row(409, "La identidad ya existe."), "SP_Cliente_Insertar")

    error = exc_info.value
    assert str(error) == "La identidad ya existe."
    assert error.code == 409
    assert error.procedure == "SP_Cliente_Insertar"


def test_raise_for_status_ignores_data_rows_and_missing_rows():
    raise_for_status({"ClienteId": 1, "code_Status": None}, "SP_Cliente_Insertar")
    raise_for_status(None, "SP_Cliente_Insertar")


def test_first_row():
    assert first_row([]) is None
    assert first_row([{"a": 1}, {"a": 2}]) == {"a": 1}
