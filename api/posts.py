from __future__ import annotations

import logging

from flask import Blueprint, request, jsonify, abort

from models import storage
from models.post import Post
from models.schemas.post import PostCreateSchema, PostUpdateSchema, PostOutSchema
from utils.decorators import jwt_required

logger = logging.getLogger(__name__)

bp = Blueprint("posts", __name__)

# Schemas
post_create_schema = PostCreateSchema()
post_update_schema = PostUpdateSchema()
post_out_schema = PostOutSchema()
posts_out_schema = PostOutSchema(many=True)


def _title_taken(session, title: str, exclude_id: str | None = None) -> bool:
    query = session.query(Post).filter(Post.title == title)
    if exclude_id:
        query = query.filter(Post.id != exclude_id)
    return query.first() is not None


@bp.post("/posts")
@jwt_required()
def create_post(identity):
    """
    Create a new post
    ---
    tags:
      - Posts
    security:
      - Bearer: []
    consumes:
      - application/json
    parameters:
      - in: body
        name: body
        required: true
        schema:
          type: object
          required: [title, subHeading, description, username]
          properties:
            title: { type: string, maxLength: 255 }
            subHeading: { type: string, maxLength: 255 }
            description: { type: string }
            username: { type: string }
            picture: { type: string }
            categories:
              type: array
              items: { type: string }
    responses:
      200:
        description: Post saved successfully
      409:
        description: A post with this title already exists
      422:
        description: Validation error
    """
    session = storage.get_session()
    data = post_create_schema.load(request.get_json(silent=True) or {})

    if _title_taken(session, data["title"]):
        abort(409, description="A post with this title already exists.")

    post = Post(
        title=data["title"],
        sub_heading=data["sub_heading"],
        description=data["description"],
        username=data["username"],
        categories=data.get("categories") or [],
        picture=data.get("picture"),
    )
    storage.new(post)
    storage.save()
    logger.info("post %s created by %s", post.id, identity.username)

    return jsonify({"msg": "Post saved successfully", "post": post_out_schema.dump(post)}), 200


@bp.get("/posts")
@jwt_required()
def list_posts(identity):
    """
    Get all posts, or filter by username or category
    ---
    tags:
      - Posts
    security:
      - Bearer: []
    parameters:
      - in: query
        name: username
        type: string
      - in: query
        name: category
        type: string
    responses:
      200:
        description: A list of posts
    """
    session = storage.get_session()
    username = request.args.get("username")
    category = request.args.get("category")

    query = session.query(Post)
    if username:
        query = query.filter(Post.username == username)
    rows = query.order_by(Post.created_date.desc()).all()
    # JSON list membership is not portable across backends; filter in Python
    if category and not username:
        rows = [p for p in rows if category in (p.categories or [])]

    return jsonify(posts_out_schema.dump(rows)), 200


@bp.get("/posts/<post_id>")
@jwt_required()
def get_post(post_id: str, identity):
    """
    Get a single post by id
    ---
    tags:
      - Posts
    security:
      - Bearer: []
    parameters:
      - in: path
        name: post_id
        type: string
        required: true
    responses:
      200:
        description: Post found
      404:
        description: Post not found
    """
    post = storage.get(Post, post_id)
    if not post:
        abort(404, description="Post not found")
    return jsonify(post_out_schema.dump(post)), 200


@bp.put("/posts/<post_id>")
@jwt_required()
def update_post(post_id: str, identity):
    """
    Update a post by id (fields not sent are left unchanged)
    ---
    tags:
      - Posts
    security:
      - Bearer: []
    consumes:
      - application/json
    parameters:
      - in: path
        name: post_id
        type: string
        required: true
      - in: body
        name: body
        required: true
        schema:
          type: object
    responses:
      200:
        description: Post updated successfully
      404:
        description: Post not found
      409:
        description: Title already used by another post
      422:
        description: Validation error
    """
    session = storage.get_session()
    post = storage.get(Post, post_id)
    if not post:
        abort(404, description="Post not found")

    data = post_update_schema.load(request.get_json(silent=True) or {})
    if "title" in data and _title_taken(session, data["title"], exclude_id=post.id):
        abort(409, description="A post with this title already exists.")

    for field in ["title", "sub_heading", "description", "username", "categories", "picture"]:
        if field in data:
            setattr(post, field, data[field])

    storage.new(post)
    storage.save()
    return jsonify({"msg": "Post updated successfully", "post": post_out_schema.dump(post)}), 200


@bp.delete("/posts/<post_id>")
@jwt_required()
def delete_post(post_id: str, identity):
    """
    Delete a post by id (its comments go with it)
    ---
    tags:
      - Posts
    security:
      - Bearer: []
    parameters:
      - in: path
        name: post_id
        type: string
        required: true
    responses:
      200:
        description: Post deleted successfully
      404:
        description: Post not found
    """
    post = storage.get(Post, post_id)
    if not post:
        abort(404, description="Post not found")

    storage.delete(post)
    storage.save()
    logger.info("post %s deleted by %s", post_id, identity.username)
    return jsonify({"msg": "Post deleted successfully"}), 200
