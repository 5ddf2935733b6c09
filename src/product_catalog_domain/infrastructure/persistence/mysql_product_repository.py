# src/product_catalog_domain/infrastructure/persistence/mysql_product_repository.py
"""MySQL implementation of Product repository."""

import logging
from contextlib import contextmanager
from typing import Iterator

import mysql.connector
from mysql.connector import Error
from mysql.connector.constants import ClientFlag

from src.common.config.settings import settings
from src.common.exceptions.custom_exceptions import DatabaseError, NotFoundError
from src.common.utils.pagination_utils import calculate_offset, normalize_sort_field
from src.product_catalog_domain.domain.entities.product import Product
from src.product_catalog_domain.domain.repositories.product_repository import IProductRepository

logger = logging.getLogger(__name__)

PRODUCT_COLUMNS = "id, name, description, price, status"


class MySQLProductRepository(IProductRepository):
    """MySQL implementation of the Product Repository.

    Every operation opens its own connection and closes it when done. Requests are
    served from a thread pool and a MySQL connection must not be shared between
    threads; closing it also ends any read snapshot, so reads see committed writes.
    """

    @contextmanager
    def _connect(self) -> Iterator["mysql.connector.MySQLConnection"]:
        """Opens a MySQL connection for the duration of one operation."""
        try:
            connection = mysql.connector.connect(
                host=settings.DB_HOST,
                port=settings.DB_PORT,
                database=settings.DB_DATABASE,
                user=settings.DB_USER,
                password=settings.DB_PASSWORD,
                autocommit=False,
                charset="utf8mb4",
                use_unicode=True,
                # rowcount reports matched rows, so an UPDATE with unchanged values is not "not found"
                client_flags=[ClientFlag.FOUND_ROWS],
            )
        except Error as e:
            raise DatabaseError(f"Failed to connect to MySQL: {e}", original_exception=e)
        try:
            yield connection
        finally:
            connection.close()

    def create_tables(self) -> None:
        """Creates the products table if it does not exist yet."""
        create_products_table_query = """
        CREATE TABLE IF NOT EXISTS products (
            id CHAR(36) PRIMARY KEY,
            name VARCHAR(100) NOT NULL,
            description VARCHAR(500),
            price DECIMAL(10, 2) NOT NULL,
            status VARCHAR(20) NOT NULL,
            INDEX idx_name (name),
            INDEX idx_price (price)
        ) ENGINE=InnoDB DEFAULT CHARSET=utf8mb4;
        """
        with self._connect() as conn:
            cursor = conn.cursor()
            try:
                cursor.execute(create_products_table_query)
                conn.commit()
                logger.info("Products table checked/created.")
            except Error as e:
                conn.rollback()
                raise DatabaseError(f"Error creating products table: {e}", original_exception=e)
            finally:
                cursor.close()

    def create(self, product: Product) -> None:
        insert_query = f"INSERT INTO products ({PRODUCT_COLUMNS}) VALUES (%s, %s, %s, %s, %s)"
        params = (product.id, product.name, product.description, product.price, product.status.value)

        with self._connect() as conn:
            cursor = conn.cursor()
            try:
                cursor.execute(insert_query, params)
                conn.commit()
            except Error as e:
                conn.rollback()
                raise DatabaseError(f"Error saving product {product.id}: {e}", original_exception=e)
            finally:
                cursor.close()

    def update(self, product: Product) -> None:
        update_query = """
        UPDATE products
        SET name = %s, description = %s, price = %s, status = %s
        WHERE id = %s
        """
        params = (product.name, product.description, product.price, product.status.value, product.id)

        with self._connect() as conn:
            cursor = conn.cursor()
            try:
                cursor.execute(update_query, params)
                conn.commit()
                affected = cursor.rowcount
            except Error as e:
                conn.rollback()
                raise DatabaseError(f"Error updating product {product.id}: {e}", original_exception=e)
            finally:
                cursor.close()

        if affected == 0:
            raise NotFoundError(f"Product {product.id} not found", entity_id=product.id)

    def get_by_id(self, product_id: str) -> Product:
        with self._connect() as conn:
            cursor = conn.cursor(dictionary=True)
            try:
                cursor.execute(f"SELECT {PRODUCT_COLUMNS} FROM products WHERE id = %s LIMIT 1", (product_id,))
                row = cursor.fetchone()
            except Error as e:
                raise DatabaseError(f"Error fetching product {product_id}: {e}", original_exception=e)
            finally:
                cursor.close()

        if row is None:
            raise NotFoundError(f"Product {product_id} not found", entity_id=product_id)
        return self._row_to_product(row)

    def list(self, page: int, limit: int, sort: str) -> tuple[list[Product], int]:
        sort_field = normalize_sort_field(sort)
        # sort_field comes from a fixed allow-list, so it is safe to interpolate
        order_by = sort_field if sort_field == "id" else f"{sort_field}, id"

        with self._connect() as conn:
            cursor = conn.cursor(dictionary=True)
            try:
                cursor.execute(
                    f"SELECT {PRODUCT_COLUMNS} FROM products ORDER BY {order_by} LIMIT %s OFFSET %s",
                    (limit, calculate_offset(page, limit)),
                )
                rows = cursor.fetchall()

                cursor.execute("SELECT COUNT(*) AS total_count FROM products")
                total_count = cursor.fetchone()["total_count"]
            except Error as e:
                raise DatabaseError(f"Error listing products: {e}", original_exception=e)
            finally:
                cursor.close()

        return [self._row_to_product(row) for row in rows], total_count

    def delete(self, product_id: str) -> None:
        with self._connect() as conn:
            cursor = conn.cursor()
            try:
                cursor.execute("DELETE FROM products WHERE id = %s", (product_id,))
                conn.commit()
                affected = cursor.rowcount
            except Error as e:
                conn.rollback()
                raise DatabaseError(f"Error deleting product {product_id}: {e}", original_exception=e)
            finally:
                cursor.close()

        if affected == 0:
            raise NotFoundError(f"Product {product_id} not found", entity_id=product_id)

    @staticmethod
    def _row_to_product(row: dict) -> Product:
        return Product.from_storage(
            product_id=row["id"],
            name=row["name"],
            description=row["description"],
            price=row["price"],
            status=row["status"],
        )
