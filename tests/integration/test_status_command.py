"""Integration tests for status command."""

from click.testing import CliRunner
from groot.cli.main import cli


class TestStatusCommand:
    """Tests for groot status command."""
    
    def test_status_fresh(self, in_repo):
        """Test status of an empty repository."""
        result = CliRunner().invoke(cli, ['status'])
        
        assert result.exit_code == 0
        assert 'HEAD: (no commits yet)' in result.output
        assert '(no untracked files)' in result.output
    
    def test_status_sections(self, repo_with_commits, monkeypatch):
        """Test staged, modified, deleted and untracked paths."""
        repo = repo_with_commits
        monkeypatch.chdir(repo.work_tree)
        runner = CliRunner()
        
        (repo.work_tree / 'new.txt').write_text('new\n')
        (repo.work_tree / 'staged.txt').write_text('s\n')
        runner.invoke(cli, ['add', 'staged.txt'])
        (repo.work_tree / 'a.txt').write_text('edited\n')
        (repo.work_tree / 'b.txt').unlink()
        
        result = runner.invoke(cli, ['status'])
        
        assert result.exit_code == 0
        assert f'HEAD: {repo.second[:7]}' in result.output
        assert 'staged:     staged.txt' in result.output
        assert 'modified:   a.txt' in result.output
        assert 'deleted:    b.txt' in result.output
        assert '  new.txt' in result.output
    
    def test_status_edit_after_add(self, in_repo):
        """Test a file changed after add is listed in both sections."""
        runner = CliRunner()
        (in_repo.work_tree / 'a.txt').write_text('one\n')
        runner.invoke(cli, ['add', 'a.txt'])
        (in_repo.work_tree / 'a.txt').write_text('two\n')
        
        result = runner.invoke(cli, ['status'])
        
        assert 'staged:     a.txt' in result.output
        assert 'modified:   a.txt' in result.output
    
    def test_status_hides_ignored(self, in_repo, working_files):
        """Test ignored paths are not listed as untracked."""
        (in_repo.work_tree / '.grootignore').write_text('subdir/\n')
        result = CliRunner().invoke(cli, ['status'])
        
        assert 'test1.txt' in result.output
        assert 'subdir' not in result.output
