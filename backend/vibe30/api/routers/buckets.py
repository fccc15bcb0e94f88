from fastapi import APIRouter, Depends, HTTPException, Response

from vibe30.core.deps import get_current_user, get_store
from vibe30.data.templates import BUCKET_TEMPLATES, get_template
from vibe30.db.models.user import User
from vibe30.schemas.buckets import (
    ActivityIn,
    ActivityMoveIn,
    ActivityOut,
    BucketCreate,
    BucketOut,
    BucketUpdate,
    DrawOut,
    TemplateOut,
)
from vibe30.services.buckets import Activity, Bucket, BucketStore, NewActivity, select_random

router = APIRouter()


def _activity_out(a: Activity) -> ActivityOut:
    return ActivityOut(id=a.id, text=a.text, description=a.description, position=a.position)


def _bucket_out(b: Bucket) -> BucketOut:
    return BucketOut(
        id=b.id,
        name=b.name,
        activities=[_activity_out(a) for a in b.activities],
        created_at=b.created_at,
        updated_at=b.updated_at,
    )


@router.get("", response_model=list[BucketOut])
def get_buckets(store: BucketStore = Depends(get_store), user: User = Depends(get_current_user)):
    return [_bucket_out(b) for b in store.list_buckets(user.id)]


@router.post("", response_model=BucketOut, status_code=201)
def post_bucket(data: BucketCreate, store: BucketStore = Depends(get_store), user: User = Depends(get_current_user)):
    bucket = store.create_bucket(
        user.id,
        data.name,
        [NewActivity(text=a.text, description=a.description) for a in data.activities],
    )
    return _bucket_out(bucket)


@router.get("/templates", response_model=list[TemplateOut])
def get_templates(_user: User = Depends(get_current_user)):
    return [
        TemplateOut(
            id=t["id"],
            name=t["name"],
            tagline=t["tagline"],
            activities=[ActivityIn(**a) for a in t["activities"]],
        )
        for t in BUCKET_TEMPLATES
    ]


@router.post("/templates/{template_id}", response_model=BucketOut, status_code=201)
def post_bucket_from_template(
    template_id: str,
    store: BucketStore = Depends(get_store),
    user: User = Depends(get_current_user),
):
    template = get_template(template_id)
    if not template:
        raise HTTPException(status_code=404, detail="Template not found")
    bucket = store.create_bucket(
        user.id,
        template["name"],
        [NewActivity(text=a["text"], description=a["description"]) for a in template["activities"]],
    )
    return _bucket_out(bucket)


@router.get("/{bucket_id}", response_model=BucketOut)
def get_bucket(bucket_id: int, store: BucketStore = Depends(get_store), user: User = Depends(get_current_user)):
    return _bucket_out(store.get_bucket(bucket_id, owner_id=user.id))


@router.put("/{bucket_id}", response_model=BucketOut)
def put_bucket(
    bucket_id: int,
    data: BucketUpdate,
    store: BucketStore = Depends(get_store),
    user: User = Depends(get_current_user),
):
    activities = None
    if data.activities is not None:
        activities = [
            Activity(text=a.text, description=a.description, position=a.position) for a in data.activities
        ]
    bucket = store.update_bucket(bucket_id, name=data.name, activities=activities, owner_id=user.id)
    return _bucket_out(bucket)


@router.delete("/{bucket_id}", status_code=204)
def delete_bucket(bucket_id: int, store: BucketStore = Depends(get_store), user: User = Depends(get_current_user)):
    store.delete_bucket(bucket_id, owner_id=user.id)
    return Response(status_code=204)


@router.post("/{bucket_id}/activities", response_model=ActivityOut, status_code=201)
def post_activity(
    bucket_id: int,
    data: ActivityIn,
    store: BucketStore = Depends(get_store),
    user: User = Depends(get_current_user),
):
    activity = store.add_activity(bucket_id, data.text, data.description, owner_id=user.id)
    return _activity_out(activity)


@router.delete("/{bucket_id}/activities/{activity_id}", status_code=204)
def delete_activity(
    bucket_id: int,
    activity_id: int,
    store: BucketStore = Depends(get_store),
    user: User = Depends(get_current_user),
):
    store.remove_activity(activity_id, bucket_id=bucket_id, owner_id=user.id)
    return Response(status_code=204)


@router.post("/{bucket_id}/activities/move", response_model=BucketOut)
def move_activity(
    bucket_id: int,
    data: ActivityMoveIn,
    store: BucketStore = Depends(get_store),
    user: User = Depends(get_current_user),
):
    bucket = store.move_activity(bucket_id, data.activity_id, data.target_id, owner_id=user.id)
    return _bucket_out(bucket)


@router.post("/{bucket_id}/draw", response_model=DrawOut)
def draw_activity(bucket_id: int, store: BucketStore = Depends(get_store), user: User = Depends(get_current_user)):
    bucket = store.get_bucket(bucket_id, owner_id=user.id)
    activity = select_random(bucket.activities)
    return DrawOut(bucket_id=bucket.id, bucket_name=bucket.name, activity=_activity_out(activity))
