from flatwiki.cli import main

main()
