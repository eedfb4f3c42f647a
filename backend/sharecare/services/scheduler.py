import logging

from apscheduler.jobstores.base import JobLookupError
from apscheduler.schedulers.background import BackgroundScheduler
from apscheduler.triggers.interval import IntervalTrigger

from sharecare.services.otp_service import OTPService

logger = logging.getLogger(__name__)


class SchedulerService:
    def __init__(self, otp_service: OTPService, interval_minutes: int = 5):
        self.scheduler = BackgroundScheduler(timezone="UTC")
        self.otp_service = otp_service
        self.interval_minutes = interval_minutes

        self._setup_jobs()

    def _setup_jobs(self):
        """Setup all scheduled jobs."""

        # Cleanup expired OTPs
        self.scheduler.add_job(
            func=self._cleanup_expired_otps,
            trigger=IntervalTrigger(minutes=self.interval_minutes),
            id='cleanup_otps',
            name='Cleanup Expired OTPs',
            replace_existing=True
        )

    def _cleanup_expired_otps(self):
        """Job function to cleanup expired OTPs."""
        try:
            removed = self.otp_service.sweep_expired()
            logger.info("OTP cleanup completed. Removed %d expired OTPs.", removed)
        except Exception:
            logger.exception("Error in OTP cleanup job")

    def start(self):
        """Start the scheduler."""
        logger.info("Starting scheduler...")
        self.scheduler.start()

        for job in self.scheduler.get_jobs():
            logger.info("Scheduled job %s (%s): next run at %s", job.name, job.id, job.next_run_time)

    def stop(self):
        """Stop the scheduler."""
        logger.info("Stopping scheduler...")
        if self.scheduler.running:
            self.scheduler.shutdown(wait=False)

    def get_jobs(self):
        """Get list of scheduled jobs."""
        jobs = []
        for job in self.scheduler.get_jobs():
            # Pending jobs (scheduler not started) have no next_run_time yet
            next_run_time = getattr(job, 'next_run_time', None)
            jobs.append({
                'id': job.id,
                'name': job.name,
                'next_run_time': next_run_time.isoformat() if next_run_time else None,
                'trigger': str(job.trigger)
            })
        return jobs

    def pause_job(self, job_id: str) -> bool:
        """Pause a specific job."""
        try:
            self.scheduler.pause_job(job_id)
            return True
        except JobLookupError as e:
            logger.warning("Error pausing job %s: %s", job_id, e)
            return False

    def resume_job(self, job_id: str) -> bool:
        """Resume a specific job."""
        try:
            self.scheduler.resume_job(job_id)
            return True
        except JobLookupError as e:
            logger.warning("Error resuming job %s: %s", job_id, e)
            return False
