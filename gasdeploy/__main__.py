from gasdeploy.cli import main

raise SystemExit(main())
