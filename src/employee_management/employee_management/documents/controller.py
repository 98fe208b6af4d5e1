from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.payload import json_body, pick_fields
from ..common.validators import optional_id, require_id, require_non_empty
from ..container import Container
from ..core.exceptions import IOFailure, ValidationError

DOCUMENT_FIELDS = {
    "documentType": ("document_type", None),
    "fileName": ("file_name", None),
    "filePath": ("file_path", None),
    "description": ("description", None),
    "status": ("status", None),
}


def register(app: Flask, container: Container) -> None:
    @app.route("/employee/documents", methods=["POST"], endpoint="create_document")
    def create_document():
        fields = pick_fields(json_body(), DOCUMENT_FIELDS)
        document = container.document_service.create_document(
            created_by_id=require_id(request.args.get("createdById"), "createdById"),
            assigned_to_id=optional_id(request.args.get("assignedToId"), "assignedToId"),
            **fields,
        )
        return jsonify(document.to_dict())

    @app.route("/employee/documents", endpoint="list_documents")
    def list_documents():
        documents = container.document_service.list_documents(status=request.args.get("status"))
        return jsonify([d.to_dict() for d in documents])

    @app.route("/employee/documents/created/<int:user_id>", endpoint="list_documents_created")
    def list_documents_created(user_id: int):
        return jsonify([d.to_dict() for d in container.document_service.list_created_by(user_id)])

    @app.route("/employee/documents/assigned/<int:user_id>", endpoint="list_documents_assigned")
    def list_documents_assigned(user_id: int):
        return jsonify([d.to_dict() for d in container.document_service.list_assigned_to(user_id)])

    @app.route("/employee/documents/<int:document_id>", endpoint="get_document")
    def get_document(document_id: int):
        return jsonify(container.document_service.get_document(document_id).to_dict())

    @app.route("/employee/documents/<int:document_id>", methods=["PUT"], endpoint="update_document")
    def update_document(document_id: int):
        changes = pick_fields(json_body(), DOCUMENT_FIELDS)
        changes.pop("file_path", None)
        return jsonify(container.document_service.update_document(document_id, changes).to_dict())

    @app.route("/employee/documents/upload", methods=["POST"], endpoint="upload_document")
    def upload_document():
        upload = request.files.get("file")
        if upload is None:
            raise ValidationError("file is required")

        try:
            document = container.document_service.upload(
                data=upload.read(),
                document_type=require_non_empty(request.form.get("documentType"), "documentType"),
                file_name=require_non_empty(request.form.get("fileName"), "fileName"),
                created_by_id=optional_id(request.form.get("createdById"), "createdById"),
            )
        except IOFailure as e:
            return jsonify({"success": False, "message": f"Failed to upload file: {e}"}), 500

        return jsonify({"success": True, "message": "File uploaded successfully", "document": document.to_dict()})
