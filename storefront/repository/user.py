import logging
from sqlalchemy import func
from sqlalchemy.orm import Session
from typing import Dict, Optional
from storefront.model.profile import Profile
from storefront.model.role import Role
from storefront.model.user import User
from storefront.model.user_schema import ProfileUpdate
from storefront.auth.utils import hash_password

logger = logging.getLogger(__name__)


def get_role_by_name(db: Session, name: str) -> Optional[Role]:
    return db.query(Role).filter(Role.name == name).first()


def get_or_create_role(db: Session, name: str, level: int = 0, description: str = None) -> Role:
    role = get_role_by_name(db, name)
    if role:
        return role

    role = Role(name=name, level=level, description=description)
    db.add(role)
    db.commit()
    db.refresh(role)
    logger.info("Created role %s (level %s)", name, level)
    return role


def create_user(db: Session, email: str, password: str, role: Role, profile: Optional[ProfileUpdate] = None):
    new_user = User(
        email=email,
        password=hash_password(password),
        role_id=role.id,
    )
    if profile is not None:
        new_user.profile = Profile(**profile.model_dump(exclude_unset=True))

    db.add(new_user)
    db.commit()
    db.refresh(new_user)
    logger.info("Created user %s with role %s", email, role.name)
    return new_user


def get_user(db: Session, email: str = None, id: int = None) -> Optional[User]:
    query = db.query(User)
    if id is not None:
        query = query.filter(User.id == id)
    if email:
        query = query.filter(func.lower(User.email) == email.lower())
    return query.first()


def update_profile(db: Session, user: User, data: ProfileUpdate) -> Profile:
    values = data.model_dump(exclude_unset=True)
    profile = user.profile
    if profile is None:
        profile = Profile(user_id=user.id, **values)
        db.add(profile)
    else:
        for key, value in values.items():
            setattr(profile, key, value)

    db.commit()
    db.refresh(profile)
    return profile


def update_password(db: Session, user: User, new_password: str) -> User:
    user.password = hash_password(new_password)
    db.commit()
    db.refresh(user)
    return user


def get_user_stats(db: Session) -> Dict:
    rows = (
        db.query(Role.name, func.count(User.id))
        .outerjoin(User, User.role_id == Role.id)
        .group_by(Role.name)
        .all()
    )
    by_role = {name: count for name, count in rows}
    return {"total": db.query(User).count(), "by_role": by_role}
