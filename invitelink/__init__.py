"""InviteLink - event invitations, RSVPs and QR check-in."""
