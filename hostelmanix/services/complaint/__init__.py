"""Complaint services."""

from hostelmanix.services.complaint.complaint_service import ComplaintService

__all__ = ["ComplaintService"]
