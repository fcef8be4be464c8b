from sqlalchemy import DateTime
from sqlalchemy.dialects import mysql
from sqlalchemy.orm import declarative_base

Base = declarative_base()

# MySQL DATETIME drops fractional seconds unless fsp is given
Timestamp = DateTime().with_variant(mysql.DATETIME(fsp=6), "mysql")
