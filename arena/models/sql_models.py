from sqlalchemy import BigInteger, Column, DateTime, Integer, String, Text
from sqlalchemy.orm import declarative_base

Base = declarative_base()


class Competition(Base):
    """
    竞赛信息表
    对应数据库表名: competitions
    除 name 外全部可为 NULL
    """
    __tablename__ = "competitions"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(255), nullable=False)
    last_registration_date = Column(DateTime, nullable=True)
    start_date = Column(DateTime, nullable=True)
    prize_pool = Column(BigInteger, nullable=True)
    desc = Column(Text, nullable=True)
    image_src = Column(String(500), nullable=True)
