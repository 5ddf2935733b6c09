# tests/test_product_catalog_domain/test_infrastructure/test_mysql_product_repository.py

from decimal import Decimal
from unittest.mock import MagicMock, Mock, patch

import pytest
from mysql.connector import Error

from src.common.config.settings import settings
from src.common.exceptions.custom_exceptions import DatabaseError, NotFoundError
from src.product_catalog_domain.domain.entities.product_status import ProductStatus
from src.product_catalog_domain.infrastructure.persistence.mysql_product_repository import (
    MySQLProductRepository,
)

STORED_ROW = {
    "id": "3f1c0b8e-5a7d-4c3e-9b8a-2d6f1e0c4b7a",
    "name": "Stored Product",
    "description": "From the database",
    "price": Decimal("19.90"),
    "status": "enabled",
}


@pytest.fixture
def mysql_product_repository_with_mock_settings(mocker) -> MySQLProductRepository:
    """Provides an instance of MySQLProductRepository with mocked settings."""
    mocker.patch.object(settings, "DB_HOST", "localhost")
    mocker.patch.object(settings, "DB_PORT", 3306)
    mocker.patch.object(settings, "DB_DATABASE", "test_db")
    mocker.patch.object(settings, "DB_USER", "test_user")
    mocker.patch.object(settings, "DB_PASSWORD", "test_password")
    return MySQLProductRepository()


@pytest.fixture
def mock_cursor(mocker) -> Mock:
    """Patches mysql.connector.connect and returns the cursor every query runs on."""
    mock_connect = mocker.patch("mysql.connector.connect")
    cursor = MagicMock()
    mock_connect.return_value.cursor.return_value = cursor
    return cursor


def test_mysql_product_repository_create_tables_success(mocker) -> None:
    """
    Tests that create_tables attempts to connect to DB and execute SQL queries.
    """
    mock_connection = mocker.patch("mysql.connector.connect")
    mock_cursor = Mock()
    mock_connection.return_value.cursor.return_value = mock_cursor

    repo = MySQLProductRepository()

    repo.create_tables()

    mock_connection.assert_called_once()
    mock_connection.return_value.close.assert_called_once()
    assert mock_cursor.execute.call_count == 1
    assert "CREATE TABLE IF NOT EXISTS products" in mock_cursor.execute.call_args[0][0]
    mock_connection.return_value.commit.assert_called_once()
    mock_cursor.close.assert_called_once()


def test_connection_failure_is_wrapped(mocker, sample_product) -> None:
    mocker.patch("mysql.connector.connect", side_effect=Error("Access denied"))

    repo = MySQLProductRepository()

    with pytest.raises(DatabaseError, match="Failed to connect to MySQL"):
        repo.create(sample_product)


def test_create_inserts_all_columns(mysql_product_repository_with_mock_settings, mock_cursor, sample_product) -> None:
    mysql_product_repository_with_mock_settings.create(sample_product)

    query, params = mock_cursor.execute.call_args[0]
    assert query.startswith("INSERT INTO products (id, name, description, price, status)")
    assert params == (sample_product.id, "Product 1", "Product 1 description", 99.90, "disabled")
    mock_cursor.close.assert_called_once()


@patch("mysql.connector.connect")
def test_create_database_error_rolls_back(
    mock_connect: Mock, mysql_product_repository_with_mock_settings: MySQLProductRepository, sample_product
) -> None:
    # Arrange
    mock_connection = MagicMock()
    mock_cursor = MagicMock()
    mock_connect.return_value = mock_connection
    mock_connection.cursor.return_value = mock_cursor
    mock_cursor.execute.side_effect = Error("Duplicate entry")

    # Act & Assert
    with pytest.raises(DatabaseError, match=f"Error saving product {sample_product.id}"):
        mysql_product_repository_with_mock_settings.create(sample_product)

    mock_connection.rollback.assert_called_once()
    mock_connection.commit.assert_not_called()
    mock_cursor.close.assert_called_once()
    mock_connection.close.assert_called_once()


def test_update_persists_status(mysql_product_repository_with_mock_settings, mock_cursor, sample_product) -> None:
    sample_product.enable()
    mock_cursor.rowcount = 1

    mysql_product_repository_with_mock_settings.update(sample_product)

    query, params = mock_cursor.execute.call_args[0]
    assert "SET name = %s, description = %s, price = %s, status = %s" in query
    assert params == ("Product 1", "Product 1 description", 99.90, "enabled", sample_product.id)
    mock_cursor.close.assert_called_once()


def test_update_missing_product_raises_not_found(
    mysql_product_repository_with_mock_settings, mock_cursor, sample_product
) -> None:
    mock_cursor.rowcount = 0

    with pytest.raises(NotFoundError):
        mysql_product_repository_with_mock_settings.update(sample_product)

    mock_cursor.close.assert_called_once()


def test_get_by_id_maps_row_to_product(mysql_product_repository_with_mock_settings, mock_cursor) -> None:
    mock_cursor.fetchone.return_value = dict(STORED_ROW)

    product = mysql_product_repository_with_mock_settings.get_by_id(STORED_ROW["id"])

    assert mock_cursor.execute.call_args[0][1] == (STORED_ROW["id"],)
    assert product.id == STORED_ROW["id"]
    assert product.name == "Stored Product"
    assert product.price == 19.9
    assert product.status == ProductStatus.ENABLED
    mock_cursor.close.assert_called_once()


def test_get_by_id_missing_row_raises_not_found(mysql_product_repository_with_mock_settings, mock_cursor) -> None:
    mock_cursor.fetchone.return_value = None

    with pytest.raises(NotFoundError) as exc_info:
        mysql_product_repository_with_mock_settings.get_by_id("missing")

    assert exc_info.value.entity_id == "missing"
    mock_cursor.close.assert_called_once()


def test_get_by_id_database_error(mysql_product_repository_with_mock_settings, mock_cursor) -> None:
    mock_cursor.execute.side_effect = Error("Lost connection")

    with pytest.raises(DatabaseError, match="Error fetching product missing"):
        mysql_product_repository_with_mock_settings.get_by_id("missing")

    mock_cursor.close.assert_called_once()


def test_list_applies_offset_and_returns_total(mysql_product_repository_with_mock_settings, mock_cursor) -> None:
    mock_cursor.fetchall.return_value = [dict(STORED_ROW)]
    mock_cursor.fetchone.return_value = {"total_count": 5}

    products, total_count = mysql_product_repository_with_mock_settings.list(2, 3, "price")

    select_call, count_call = mock_cursor.execute.call_args_list
    assert "ORDER BY price, id LIMIT %s OFFSET %s" in select_call[0][0]
    assert select_call[0][1] == (3, 3)
    assert count_call[0][0] == "SELECT COUNT(*) AS total_count FROM products"
    assert total_count == 5
    assert [p.id for p in products] == [STORED_ROW["id"]]
    mock_cursor.close.assert_called_once()


@pytest.mark.parametrize("sort", ["status", "name; DROP TABLE products", ""])
def test_list_unknown_sort_falls_back_to_id(mysql_product_repository_with_mock_settings, mock_cursor, sort) -> None:
    mock_cursor.fetchall.return_value = []
    mock_cursor.fetchone.return_value = {"total_count": 0}

    mysql_product_repository_with_mock_settings.list(1, 10, sort)

    select_query = mock_cursor.execute.call_args_list[0][0][0]
    assert "ORDER BY id LIMIT" in select_query
    assert "DROP" not in select_query


def test_delete_existing_product(mysql_product_repository_with_mock_settings, mock_cursor) -> None:
    mock_cursor.rowcount = 1

    mysql_product_repository_with_mock_settings.delete("some-id")

    mock_cursor.execute.assert_called_once_with("DELETE FROM products WHERE id = %s", ("some-id",))
    mock_cursor.close.assert_called_once()


def test_delete_missing_product_raises_not_found(mysql_product_repository_with_mock_settings, mock_cursor) -> None:
    mock_cursor.rowcount = 0

    with pytest.raises(NotFoundError, match="Product missing not found"):
        mysql_product_repository_with_mock_settings.delete("missing")


def test_each_operation_uses_its_own_connection(
    mocker, mysql_product_repository_with_mock_settings: MySQLProductRepository
) -> None:
    mock_connect = mocker.patch("mysql.connector.connect")
    first_connection, second_connection = MagicMock(), MagicMock()
    mock_connect.side_effect = [first_connection, second_connection]
    first_connection.cursor.return_value.fetchone.return_value = dict(STORED_ROW)
    second_connection.cursor.return_value.fetchall.return_value = []
    second_connection.cursor.return_value.fetchone.return_value = {"total_count": 0}

    mysql_product_repository_with_mock_settings.get_by_id(STORED_ROW["id"])
    mysql_product_repository_with_mock_settings.list(1, 10, "id")

    assert mock_connect.call_count == 2
    first_connection.close.assert_called_once()
    second_connection.close.assert_called_once()


def test_connection_is_closed_when_a_read_fails(
    mocker, mysql_product_repository_with_mock_settings: MySQLProductRepository
) -> None:
    mock_connect = mocker.patch("mysql.connector.connect")
    mock_connect.return_value.cursor.return_value.execute.side_effect = Error("Lost connection")

    with pytest.raises(DatabaseError, match="Error listing products"):
        mysql_product_repository_with_mock_settings.list(1, 10, "name")

    mock_connect.return_value.close.assert_called_once()
