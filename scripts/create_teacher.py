"""
교사 계정 추가 스크립트 (공개 API로는 계정을 만들 수 없음)

사용법 (프로젝트 루트에서):
    python -m scripts.create_teacher <username> <password>
"""

import argparse
import sys

from sqlalchemy.orm import Session

from database.db import SessionLocal
from database.init_db import init_db
from services.auth_service import create_teacher


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Create a teacher account")
    parser.add_argument("username")
    parser.add_argument("password")
    args = parser.parse_args(argv)
    if not args.username.strip() or not args.password:
        parser.error("username and password must not be empty")

    init_db()  # ✅ 테이블이 없으면 먼저 생성
    db: Session = SessionLocal()
    try:
        teacher = create_teacher(db, args.username.strip(), args.password)
    except ValueError as e:
        print(f"⚠️ {e}")
        return 1
    finally:
        db.close()

    print(f"✅ 교사 계정 생성 완료: id={teacher.id} username={teacher.username}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
