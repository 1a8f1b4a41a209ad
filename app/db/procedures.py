"""
Stored procedure execution.

Every call borrows one DBAPI connection from the engine, invokes exactly
one procedure, reads its result sets into column-keyed dicts and gives the
connection back, whatever the outcome.
"""
import logging
from typing import Any, Dict, List, Optional, Sequence

import pymysql
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError

from app.db.base import create_db_engine
from app.infrastructure.exceptions import DatabaseConnectionError, ProcedureError
from app.models.status import StatusRow, is_status_row

logger = logging.getLogger(__name__)

Row = Dict[str, Any]


class ProcedureExecutor:
    """Runs stored procedures against the database behind ``database_uri``."""

    def __init__(self, database_uri: Optional[str] = None, engine: Optional[Engine] = None, **engine_options: Any):
        if engine is None:
            if not database_uri:
                raise ValueError("database_uri or engine is required")
            engine = create_db_engine(database_uri, **engine_options)
        self.engine = engine

    def call(self, name: str, params: Sequence[Any] = ()) -> List[Row]:
        """Invoke ``name`` and return the rows of its first result set."""
        result_sets = self._execute(name, params)
        return result_sets[0] if result_sets else []

    def call_multi(self, name: str, params: Sequence[Any] = ()) -> List[List[Row]]:
        """Invoke ``name`` and return every result set it produced, in order."""
        return self._execute(name, params)

    def _execute(self, name: str, params: Sequence[Any]) -> List[List[Row]]:
        logger.debug(f"调用存储过程 {name}, 参数数量: {len(params)}")
        try:
            connection = self.engine.raw_connection()
        except SQLAlchemyError as e:
            logger.error(f"数据库连接失败: {str(e)}")
            raise DatabaseConnectionError(str(e)) from e

        try:
            cursor = connection.cursor()
            try:
                cursor.callproc(name, list(params))
                result_sets = []
                # 读完所有结果集才能释放连接，包括不需要的
                while True:
                    if cursor.description is not None:
                        columns = [column[0] for column in cursor.description]
                        result_sets.append([dict(zip(columns, row)) for row in cursor.fetchall()])
                    if not cursor.nextset():
                        break
            finally:
                cursor.close()
            connection.commit()
            return result_sets
        except pymysql.MySQLError as e:
            logger.error(f"存储过程 {name} 执行失败: {str(e)}")
            raise DatabaseConnectionError(str(e)) from e
        finally:
            connection.close()


def raise_for_status(row: Optional[Row], procedure: str) -> None:
    """Turn a status row into :class:`ProcedureError`; data rows pass through."""
    if is_status_row(row):
        status = StatusRow.from_row(row)
        logger.warning(f"存储过程 {procedure} 返回错误: [{status.code}] {status.message}")
        raise ProcedureError(status.message, code=status.code, procedure=procedure)


def first_row(rows: List[Row]) -> Optional[Row]:
    return rows[0] if rows else None
