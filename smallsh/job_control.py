import os

import psutil

from smallsh.config import MAX_BACKGROUND_JOBS


class JobTable:
    """Background pids not yet reaped"""

    def __init__(self, capacity=MAX_BACKGROUND_JOBS):
        self.capacity = capacity
        self.jobs = set()

    def __len__(self):
        return len(self.jobs)

    def __contains__(self, pid):
        return pid in self.jobs

    def record(self, pid):
        """
        Start tracking a background pid.
        Returns False when the table is full; the job keeps running untracked.
        """
        if pid in self.jobs:
            return True
        if self.capacity is not None and len(self.jobs) >= self.capacity:
            return False
        self.jobs.add(pid)
        return True

    def reap_all(self):
        """Non-blocking check of every tracked job, report and forget the finished ones"""
        for pid in list(self.jobs):
            try:
                done_pid, status = os.waitpid(pid, os.WNOHANG)
            except ChildProcessError:
                # reaped somewhere else, nothing left to report
                self.jobs.discard(pid)
                continue
            if done_pid == 0:
                continue

            if os.WIFEXITED(status):
                print(f"background pid {pid} is done. exit value {os.WEXITSTATUS(status)}", flush=True)
                self.jobs.discard(pid)
            elif os.WIFSIGNALED(status):
                print(f"background pid {pid} is done: terminated by signal {os.WTERMSIG(status)}", flush=True)
                self.jobs.discard(pid)

    def kill_all(self):
        """SIGKILL every tracked job (used by exit)"""
        for pid in list(self.jobs):
            print(f"Attempting to kill {pid}", flush=True)
            try:
                psutil.Process(pid).kill()
            except (psutil.NoSuchProcess, psutil.AccessDenied):
                print(f"Process {pid} was not killed", flush=True)
            else:
                print(f"Process {pid} was killed", flush=True)
