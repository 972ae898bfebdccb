from __future__ import annotations

from flask import Blueprint, request, jsonify, abort

from models import storage
from models.comment import Comment
from models.post import Post
from models.schemas.comment import CommentCreateSchema, CommentOutSchema
from utils.decorators import jwt_required

bp = Blueprint("comments", __name__)

create_schema = CommentCreateSchema()
out_schema = CommentOutSchema()
out_list_schema = CommentOutSchema(many=True)


@bp.post("/comments")
@jwt_required()
def create_comment(identity):
    """
    Create a comment on a post
    ---
    tags: [Comments]
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
          required: [content, username, postId]
          properties:
            content: { type: string }
            username: { type: string }
            postId: { type: string }
    responses:
      200: { description: Comment saved successfully }
      404: { description: Post not found }
      422: { description: Validation error }
    """
    data = create_schema.load(request.get_json(silent=True) or {})
    if not storage.get(Post, data["post_id"]):
        abort(404, description="Post not found")

    c = Comment(content=data["content"], username=data["username"], post_id=data["post_id"])
    storage.new(c)
    storage.save()
    return jsonify({"msg": "Comment saved successfully", "comment": out_schema.dump(c)}), 200


@bp.get("/comments/<post_id>")
@jwt_required()
def list_comments(post_id: str, identity):
    """
    Get all comments for a post
    ---
    tags: [Comments]
    security:
      - Bearer: []
    parameters:
      - in: path
        name: post_id
        type: string
        required: true
    responses:
      200: { description: A list of comments }
    """
    session = storage.get_session()
    rows = (
        session.query(Comment)
        .filter(Comment.post_id == post_id)
        .order_by(Comment.date.asc())
        .all()
    )
    return jsonify(out_list_schema.dump(rows)), 200


@bp.delete("/comments/<comment_id>")
@jwt_required()
def delete_comment(comment_id: str, identity):
    """
    Delete a comment by id
    ---
    tags: [Comments]
    security:
      - Bearer: []
    parameters:
      - in: path
        name: comment_id
        type: string
        required: true
    responses:
      200: { description: Comment deleted successfully }
      404: { description: Comment not found }
    """
    c = storage.get(Comment, comment_id)
    if not c:
        abort(404, description="Comment not found")
    storage.delete(c)
    storage.save()
    return jsonify({"msg": "Comment deleted successfully"}), 200
